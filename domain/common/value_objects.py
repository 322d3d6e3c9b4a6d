"""Common Value Objects.

Geographic primitives in WGS84 (EPSG:4326) shared by the zoning, tiles and
climate bounded contexts. All validation occurs at construction time via
Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GeoPoint(BaseModel):
    """Geographic coordinate in WGS84 (Value Object).

    Invariants:
        latitude in [-90, 90]
        longitude in [-180, 180]

    Frozen Pydantic models compare by value, so
    GeoPoint(latitude=1, longitude=2) == GeoPoint(latitude=1, longitude=2).
    """

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True)

    def as_lon_lat(self) -> tuple[float, float]:
        """Return the (lon, lat) pair used by ring geometry."""
        return (self.longitude, self.latitude)


class BoundingBox(BaseModel):
    """Lon/lat rectangle, e.g. the ground covered by one map tile (Value Object).

    Edges are in degrees. A tile's north edge is its top row and its south
    edge the top row of the tile below, so adjacent tiles share edges and
    containment is inclusive on every side.

    Invariants:
        west < east (no antimeridian-crossing boxes)
        south < north
    """

    west: float = Field(ge=-180, le=180)
    south: float = Field(ge=-90, le=90)
    east: float = Field(ge=-180, le=180)
    north: float = Field(ge=-90, le=90)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_edge_order(self) -> "BoundingBox":
        if not (self.west < self.east):
            raise ValueError(f"west edge {self.west} must lie west of east edge {self.east}")
        if not (self.south < self.north):
            raise ValueError(
                f"south edge {self.south} must lie south of north edge {self.north}"
            )
        return self

    def contains(self, point: GeoPoint) -> bool:
        """Inclusive test: points on a shared tile edge belong to both tiles."""
        return (
            self.west <= point.longitude <= self.east
            and self.south <= point.latitude <= self.north
        )

    @property
    def center(self) -> GeoPoint:
        """Midpoint in degrees (not the Mercator midpoint, but always inside)."""
        return GeoPoint(
            latitude=(self.south + self.north) / 2,
            longitude=(self.west + self.east) / 2,
        )
