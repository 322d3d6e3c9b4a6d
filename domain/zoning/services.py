"""Zoning Bounded Context - Domain Services.

Ray-casting containment over rings, regions with holes and multi-regions.
O(total vertices) per query; no spatial index.

Boundary behavior:
    A point exactly on an edge or vertex gets whatever the crossing test
    yields. The result is deterministic for identical input but is not part
    of the contract: callers must not rely on boundary membership.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from domain.common.value_objects import GeoPoint
from domain.zoning.value_objects import (
    SUPPORTED_GEOMETRY_TYPES,
    MultiRegion,
    Region,
)

MIN_RING_VERTICES = 3


def point_in_ring(point: GeoPoint, ring: Sequence[Sequence[float]]) -> bool:
    """Ray-casting parity test.

    Casts a ray from the point towards +x (east) and toggles membership at
    every ring edge it crosses. Edges are taken cyclically, so the ring does
    not need to be closed.

    Args:
        point: Query location
        ring: Ordered ``(lon, lat)`` vertices

    Returns:
        True if the number of crossings is odd
    """
    if len(ring) < MIN_RING_VERTICES:
        return False

    x, y = point.longitude, point.latitude
    inside = False

    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]
        # Edge straddles the ray's horizontal line and crosses right of x.
        # Straddling guarantees yj != yi, so the division is safe.
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i

    return inside


def point_in_region(point: GeoPoint, region: Region) -> bool:
    """Inside the outer ring and inside none of the holes."""
    if not point_in_ring(point, region.outer):
        return False
    return not any(point_in_ring(point, hole) for hole in region.holes)


def point_in_multi_region(
    point: GeoPoint, regions: MultiRegion | Iterable[Region]
) -> bool:
    """True if any region contains the point (regions are never merged)."""
    if isinstance(regions, MultiRegion):
        regions = regions.regions
    return any(point_in_region(point, region) for region in regions)


def find_containing_feature(
    point: GeoPoint, features: Iterable[Mapping[str, Any]]
) -> Mapping[str, Any] | None:
    """Return the properties of the first feature containing the point.

    Features are GeoJSON-like mappings with ``geometry`` and ``properties``.
    Features without geometry, or with a geometry other than Polygon or
    MultiPolygon, are skipped.

    Returns:
        The matching feature's properties ({} if it has none), or None
    """
    for feature in features:
        geometry = feature.get("geometry")
        if not geometry or geometry.get("type") not in SUPPORTED_GEOMETRY_TYPES:
            continue
        if point_in_multi_region(point, MultiRegion.from_geojson(geometry)):
            return feature.get("properties") or {}
    return None
