"""Site Planner Domain Layer.

This package contains the site geometry and spatial statistics kernel
organized by bounded contexts:
- floor_area: Shape areas, void subtraction, floor and building totals
- zoning: Point containment in zoning regions with holes
- tiles: Web Mercator slippy-map tile addressing
- climate: Weather station search and wind direction statistics
"""

# Imports alphabetized per project style (isort)
from domain import climate, common, floor_area, tiles, zoning

__all__ = ["climate", "common", "floor_area", "tiles", "zoning"]
