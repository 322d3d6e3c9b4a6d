"""Tiles Bounded Context - Domain Services.

Web Mercator (EPSG:3857) slippy-map tiling: the world is a 2**zoom by
2**zoom grid, x growing east from the antimeridian and y growing south from
the northern projection limit.
"""

from __future__ import annotations

import math

from domain.common.value_objects import BoundingBox, GeoPoint
from domain.tiles.errors import OutsideMercatorRangeError
from domain.tiles.value_objects import TileAddress

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
# atan(sinh(pi)) in degrees: the latitude where the square projection ends
MAX_LATITUDE = 85.0511287798066


def is_within_mercator_range(latitude: float) -> bool:
    """True for latitudes strictly inside the projection limits."""
    return -MAX_LATITUDE < latitude < MAX_LATITUDE


def lon_lat_to_tile(lon: float, lat: float, zoom: int) -> tuple[int, int]:
    """Convert a geographic coordinate to tile indices.

    Latitude must lie within (-MAX_LATITUDE, MAX_LATITUDE); outside that
    range the result is undefined. Use tile_for_point for a checked variant.

    Returns:
        Tuple of (x, y)
    """
    n = 2**zoom
    lat_rad = math.radians(lat)
    x = math.floor((lon + 180.0) / 360.0 * n)
    y = math.floor(
        (1.0 - math.log(math.tan(lat_rad) + 1.0 / math.cos(lat_rad)) / math.pi)
        / 2.0
        * n
    )
    return (x, y)


def tile_for_point(point: GeoPoint, zoom: int) -> TileAddress:
    """Tile containing a point, with Mercator range validation.

    Points on the antimeridian (longitude 180) wrap to column 0.

    Raises:
        OutsideMercatorRangeError: If the latitude cannot be projected
    """
    if not is_within_mercator_range(point.latitude):
        raise OutsideMercatorRangeError(point.latitude, MAX_LATITUDE)
    x, y = lon_lat_to_tile(point.longitude, point.latitude, zoom)
    return TileAddress(zoom=zoom, x=x % (2**zoom), y=y)


def tile_to_lon_lat(x: int, y: int, zoom: int) -> tuple[float, float]:
    """North-west corner of a tile as ``(lon, lat)`` (inverse projection)."""
    n = 2**zoom
    lon = x / n * 360.0 - 180.0
    lat = math.degrees(math.atan(math.sinh(math.pi * (1.0 - 2.0 * y / n))))
    return (lon, lat)


def tile_bounds(tile: TileAddress) -> BoundingBox:
    """Geographic extent covered by a tile."""
    west, north = tile_to_lon_lat(tile.x, tile.y, tile.zoom)
    east, south = tile_to_lon_lat(tile.x + 1, tile.y + 1, tile.zoom)
    return BoundingBox(west=west, south=south, east=east, north=north)
