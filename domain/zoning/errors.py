"""Zoning Bounded Context - Error Hierarchy."""

from __future__ import annotations


class ZoningError(Exception):
    """Base error for zoning operations."""


class UnsupportedGeometryError(ZoningError):
    """Geometry type cannot be converted to regions (only Polygon/MultiPolygon).

    Attributes:
        geometry_type: The offending GeoJSON ``type`` value
    """

    def __init__(self, geometry_type: object) -> None:
        self.geometry_type = geometry_type
        super().__init__(f"Unsupported geometry type: {geometry_type!r}")
