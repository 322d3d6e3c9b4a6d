"""Climate Bounded Context - Value Objects.

Immutable station catalog entries and wind direction statistics.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

import numpy as np
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from domain.common.value_objects import GeoPoint


# ---------------------------------------------------------------------------
# Compass
# ---------------------------------------------------------------------------
class CompassOctant(str, Enum):
    """45-degree compass sector, declared clockwise from north."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"

    @property
    def position(self) -> int:
        """Position in clockwise order, N == 0."""
        return _OCTANTS.index(self)

    @classmethod
    def from_index(cls, index: int) -> "CompassOctant":
        return _OCTANTS[index % len(_OCTANTS)]


_OCTANTS: tuple[CompassOctant, ...] = tuple(CompassOctant)
OCTANT_COUNT = len(_OCTANTS)


# ---------------------------------------------------------------------------
# Stations
# ---------------------------------------------------------------------------
DegreeMinute = tuple[float, float]  # (degrees, minutes)


def degree_minute_to_decimal(value: DegreeMinute) -> float:
    """Convert a (degrees, minutes) pair to decimal degrees."""
    degrees, minutes = value
    return degrees + minutes / 60.0


class Station(BaseModel):
    """Observation station catalog entry (Value Object).

    Coordinates are kept as (degrees, minutes) pairs the way the catalog
    publishes them; decimal degrees are derived on access.

    Invariants:
        minutes in [0, 60)
        derived latitude in [-90, 90], longitude in [-180, 180]
    """

    station_id: str = Field(min_length=1)
    name: str
    kana_name: str = ""
    english_name: str = ""
    station_type: str = ""
    capabilities: str = ""  # Per-element observation flags, e.g. "11112010"
    latitude_dm: DegreeMinute
    longitude_dm: DegreeMinute

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_coordinates(self) -> "Station":
        for label, value in (("latitude", self.latitude_dm), ("longitude", self.longitude_dm)):
            if not (0 <= value[1] < 60):
                raise ValueError(f"{label} minutes out of range: {value[1]}")
        if not (-90 <= self.latitude <= 90):
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not (-180 <= self.longitude <= 180):
            raise ValueError(f"longitude out of range: {self.longitude}")
        return self

    @property
    def latitude(self) -> float:
        return degree_minute_to_decimal(self.latitude_dm)

    @property
    def longitude(self) -> float:
        return degree_minute_to_decimal(self.longitude_dm)

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class StationCatalog(BaseModel):
    """Fixed, load-time-constant station table (Value Object).

    Iteration order is the load order; nearest-station ties resolve to the
    earliest entry.
    """

    stations: tuple[Station, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "StationCatalog":
        seen: set[str] = set()
        for station in self.stations:
            if station.station_id in seen:
                raise ValueError(f"Duplicate station id: {station.station_id}")
            seen.add(station.station_id)
        return self

    def __len__(self) -> int:
        return len(self.stations)

    def get(self, station_id: str) -> Station | None:
        """Look up a station by identifier."""
        return next((s for s in self.stations if s.station_id == station_id), None)


class NearestStation(BaseModel):
    """Result of a nearest-station search."""

    station: Station
    distance_km: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Wind Statistics
# ---------------------------------------------------------------------------
class DirectionalSample(BaseModel):
    """One observation of speed and direction (Value Object).

    direction_deg is expected in [0, 360); other values are not normalized.
    """

    timestamp: datetime
    speed: float
    direction_deg: float

    model_config = ConfigDict(frozen=True)


class DirectionalHistogram(BaseModel):
    """Per-octant sample counts (Value Object).

    Invariants:
        len(counts) == 8, ordered N, NE, E, SE, S, SW, W, NW
        every count >= 0
        total_count == sum(counts)

    total_count may be omitted; it is derived from the validated counts and
    is always an int after construction.
    """

    counts: tuple[int, ...] = (0,) * OCTANT_COUNT
    total_count: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_counts(self) -> "DirectionalHistogram":
        if len(self.counts) != OCTANT_COUNT:
            raise ValueError(f"Expected {OCTANT_COUNT} counts, got {len(self.counts)}")
        if any(c < 0 for c in self.counts):
            raise ValueError(f"Counts must be non-negative: {self.counts}")
        if self.total_count is None:
            object.__setattr__(self, "total_count", sum(self.counts))
        elif self.total_count != sum(self.counts):
            raise ValueError(
                f"total_count={self.total_count} but counts sum to {sum(self.counts)}"
            )
        return self

    def count(self, octant: CompassOctant) -> int:
        return self.counts[octant.position]

    def frequency(self, octant: CompassOctant) -> float:
        """Share of samples in an octant (0.0 to 1.0); 0.0 when empty."""
        if self.total_count == 0:
            return 0.0
        return self.counts[octant.position] / self.total_count

    @property
    def dominant_direction(self) -> CompassOctant | None:
        """Octant with the highest count, lowest index on ties; None if empty."""
        if self.total_count == 0:
            return None
        # argmax returns the first occurrence of the maximum
        return CompassOctant.from_index(int(np.argmax(self.counts)))


class PassiveDesignAnalysis(BaseModel):
    """Seasonal wind histograms and per-octant opening suitability.

    suitability is exposed as a read-only mapping in compass order.
    """

    summer_wind: DirectionalHistogram
    winter_wind: DirectionalHistogram
    suitability: dict[CompassOctant, int]

    model_config = ConfigDict(frozen=True)

    @field_validator("suitability", mode="before")
    @classmethod
    def copy_mapping(cls, value: Any) -> Any:
        # Accept read-only mappings such as suitability_scores() results
        if isinstance(value, Mapping):
            return dict(value)
        return value

    @model_validator(mode="after")
    def freeze_suitability(self) -> "PassiveDesignAnalysis":
        ordered = {
            octant: self.suitability[octant]
            for octant in CompassOctant
            if octant in self.suitability
        }
        object.__setattr__(self, "suitability", MappingProxyType(ordered))
        return self

    @field_serializer("suitability")
    def serialize_suitability(
        self, value: Mapping[CompassOctant, int]
    ) -> dict[CompassOctant, int]:
        return dict(value)
