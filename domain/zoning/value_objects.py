"""Zoning Bounded Context - Value Objects.

Rings are ordered sequences of ``(lon, lat)`` pairs, the axis order used by
GeoJSON and vector tiles. A ring may be open or closed (last vertex repeating
the first); both describe the same boundary.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from domain.zoning.errors import UnsupportedGeometryError

Ring = tuple[tuple[float, float], ...]

SUPPORTED_GEOMETRY_TYPES = ("Polygon", "MultiPolygon")


def _ring(coordinates: Sequence[Sequence[float]]) -> Ring:
    # Positions may carry a third (altitude) value; only lon/lat are kept
    return tuple((float(position[0]), float(position[1])) for position in coordinates)


class Region(BaseModel):
    """Polygon with zero or more holes (Value Object).

    Holes are expected to lie inside the outer ring; this is not verified.
    """

    outer: Ring
    holes: tuple[Ring, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_rings(cls, rings: Sequence[Sequence[Sequence[float]]]) -> "Region":
        """Build from GeoJSON Polygon coordinates: ring 0 outer, rest holes."""
        if not rings:
            return cls(outer=())
        return cls(
            outer=_ring(rings[0]),
            holes=tuple(_ring(hole) for hole in rings[1:]),
        )


class MultiRegion(BaseModel):
    """Ordered sequence of independent candidate regions (Value Object)."""

    regions: tuple[Region, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_geojson(cls, geometry: Mapping[str, Any]) -> "MultiRegion":
        """Convert a GeoJSON Polygon or MultiPolygon geometry.

        Raises:
            UnsupportedGeometryError: For any other geometry type
        """
        geometry_type = geometry.get("type")
        coordinates = geometry.get("coordinates") or []
        if geometry_type == "Polygon":
            return cls(regions=(Region.from_rings(coordinates),))
        if geometry_type == "MultiPolygon":
            return cls(regions=tuple(Region.from_rings(rings) for rings in coordinates))
        raise UnsupportedGeometryError(geometry_type)
