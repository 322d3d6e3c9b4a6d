"""Tiles Bounded Context - Error Hierarchy."""

from __future__ import annotations


class TileError(Exception):
    """Base error for tile addressing."""


class OutsideMercatorRangeError(TileError):
    """Latitude lies outside the Web Mercator projection range.

    Attributes:
        latitude: The offending latitude in degrees
    """

    def __init__(self, latitude: float, max_latitude: float) -> None:
        self.latitude = latitude
        super().__init__(
            f"Latitude {latitude:.6f} outside Web Mercator range "
            f"(-{max_latitude:.4f}, {max_latitude:.4f})"
        )
