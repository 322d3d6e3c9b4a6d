"""Climate Bounded Context.

Responsible for site climate statistics:
- Value Objects: Station, StationCatalog, DirectionalSample,
  DirectionalHistogram, CompassOctant
- Services: great_circle_distance_km, nearest_station, aggregate,
  dominant_direction, suitability_scores, analyze_passive_design
- Ports: StationCatalogRepository
"""
