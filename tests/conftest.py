"""Root pytest configuration for all tests.

Provides shared fixtures that build domain Value Objects directly (no I/O),
so every bounded context can be tested in isolation.
"""

from __future__ import annotations

import pytest

from domain.climate.value_objects import Station, StationCatalog
from domain.zoning.value_objects import Region


@pytest.fixture
def three_station_catalog() -> StationCatalog:
    """Catalog with known degree+minute coordinates.

    A: 35°30'N 135°00'E  (35.5, 135.0)
    B: 36°00'N 136°00'E  (36.0, 136.0)
    C: 34°00'N 137°00'E  (34.0, 137.0)
    """
    return StationCatalog(
        stations=(
            Station(
                station_id="A",
                name="Alpha",
                latitude_dm=(35, 30),
                longitude_dm=(135, 0),
            ),
            Station(
                station_id="B",
                name="Bravo",
                latitude_dm=(36, 0),
                longitude_dm=(136, 0),
            ),
            Station(
                station_id="C",
                name="Charlie",
                latitude_dm=(34, 0),
                longitude_dm=(137, 0),
            ),
        )
    )


@pytest.fixture
def square_with_hole() -> Region:
    """10x10 square with a 2x2 hole centered at (5, 5)."""
    return Region(
        outer=((0, 0), (10, 0), (10, 10), (0, 10)),
        holes=(((4, 4), (6, 4), (6, 6), (4, 6)),),
    )
