"""Climate Bounded Context - Error Hierarchy."""

from __future__ import annotations


class ClimateError(Exception):
    """Base error for climate operations."""


class InvalidStationRecordError(ClimateError):
    """A station catalog record is malformed.

    Attributes:
        station_id: Identifier of the offending record
    """

    def __init__(self, station_id: str, reason: str) -> None:
        self.station_id = station_id
        super().__init__(f"Invalid station record {station_id!r}: {reason}")
