"""Mapping adapter for StationCatalogRepository.

Builds the domain StationCatalog from the record mapping published by the
station catalog provider (AMeDAS layout)::

    {
        "11001": {
            "type": "C",
            "elems": "11112010",
            "lat": [45, 31.2],
            "lon": [141, 56.1],
            "kjName": "宗谷岬",
            "knName": "ソウヤミサキ",
            "enName": "Soyamisaki",
        },
        ...
    }

Reading the mapping from disk or network is the provider's concern. The
adapter only validates and translates, preserving mapping order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from domain.climate.errors import InvalidStationRecordError
from domain.climate.value_objects import Station, StationCatalog

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


def _degree_minute(record: Mapping[str, Any], key: str, station_id: str) -> tuple[float, float]:
    value = record.get(key)
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise InvalidStationRecordError(station_id, f"{key!r} must be a [deg, min] pair")
    try:
        return (float(value[0]), float(value[1]))
    except (TypeError, ValueError) as e:
        raise InvalidStationRecordError(station_id, f"{key!r} is not numeric") from e


def station_from_record(station_id: str, record: Mapping[str, Any]) -> Station:
    """Translate one provider record into a Station.

    Raises:
        InvalidStationRecordError: Missing or malformed coordinates or name
    """
    if not isinstance(record, Mapping):
        raise InvalidStationRecordError(station_id, "record is not a mapping")

    try:
        return Station(
            station_id=station_id,
            name=record.get("kjName") or record.get("enName") or station_id,
            kana_name=record.get("knName", ""),
            english_name=record.get("enName", ""),
            station_type=record.get("type", ""),
            capabilities=record.get("elems", ""),
            latitude_dm=_degree_minute(record, "lat", station_id),
            longitude_dm=_degree_minute(record, "lon", station_id),
        )
    except ValidationError as e:
        raise InvalidStationRecordError(station_id, str(e)) from e


class MappingStationCatalogAdapter:
    """Infrastructure adapter producing a StationCatalog from provider records.

    Parameters
    ----------
    records: Mapping[str, Mapping[str, Any]]
        Station id -> provider record, in catalog order.
    strict: bool
        If True, the first malformed record raises InvalidStationRecordError.
        Otherwise malformed records are logged and skipped.
    """

    def __init__(self, records: Mapping[str, Mapping[str, Any]], strict: bool = False) -> None:
        self.records = records
        self.strict = strict

    def load_catalog(self) -> StationCatalog:
        """Validate every record and return the immutable catalog."""
        stations: list[Station] = []
        skipped = 0

        for station_id, record in self.records.items():
            try:
                station = station_from_record(str(station_id), record)
            except InvalidStationRecordError as e:
                if self.strict:
                    raise
                skipped += 1
                logger.warning("Skipping station record: %s", e)
                continue
            logger.debug(
                "Loaded station %s (%s) at %.4f, %.4f",
                station.station_id,
                station.name,
                station.latitude,
                station.longitude,
            )
            stations.append(station)

        logger.info("Loaded %d stations (%d skipped)", len(stations), skipped)
        return StationCatalog(stations=tuple(stations))
