"""Floor Area Bounded Context.

Responsible for legal floor area computation in planar meters:
- Value Objects: PlanarPoint, RectangleShape, PolygonShape, Floor
- Services: area, signed_area, net_area, building_area
"""
