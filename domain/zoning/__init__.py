"""Zoning Bounded Context.

Responsible for locating a site inside zoning/planning regions:
- Value Objects: Region (outer ring + holes), MultiRegion
- Services: point_in_ring, point_in_region, point_in_multi_region,
  find_containing_feature
"""
