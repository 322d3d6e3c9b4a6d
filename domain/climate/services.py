"""Climate Bounded Context - Domain Services.

Pure statistics over station coordinates and wind observations.
NO I/O operations - the station catalog is supplied through
StationCatalogRepository and weather history by the caller.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

import numpy as np
from numpy.typing import ArrayLike, NDArray

from domain.climate.constants import (
    CALM_SPEED_THRESHOLD,
    DEFAULT_SUITABILITY_WEIGHTS,
    EARTH_RADIUS_KM,
    OCTANT_WIDTH_DEG,
    SUMMER_MONTHS,
    WINTER_MONTHS,
    SuitabilityWeights,
)
from domain.climate.value_objects import (
    OCTANT_COUNT,
    CompassOctant,
    DirectionalHistogram,
    DirectionalSample,
    NearestStation,
    PassiveDesignAnalysis,
    Station,
    StationCatalog,
)

MonthPredicate = Callable[[int], bool]


# ---------------------------------------------------------------------------
# Great-Circle Distance
# ---------------------------------------------------------------------------
def _haversine_km(
    lat_a: ArrayLike, lon_a: ArrayLike, lat_b: ArrayLike, lon_b: ArrayLike
) -> NDArray[np.float64]:
    """Vectorized haversine distance on a sphere of EARTH_RADIUS_KM."""
    phi_a = np.radians(lat_a)
    phi_b = np.radians(lat_b)
    d_phi = np.radians(np.subtract(lat_b, lat_a))
    d_lambda = np.radians(np.subtract(lon_b, lon_a))

    h = np.sin(d_phi / 2) ** 2 + np.cos(phi_a) * np.cos(phi_b) * np.sin(d_lambda / 2) ** 2
    # Rounding can push h marginally past 1 for antipodal points
    h = np.clip(h, 0.0, 1.0)
    return EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def great_circle_distance_km(
    lat_a: float, lon_a: float, lat_b: float, lon_b: float
) -> float:
    """Haversine distance between two points in kilometers (always >= 0)."""
    return float(_haversine_km(lat_a, lon_a, lat_b, lon_b))


# ---------------------------------------------------------------------------
# Nearest Station
# ---------------------------------------------------------------------------
def nearest_station(
    lat: float, lon: float, catalog: StationCatalog | Iterable[Station]
) -> NearestStation | None:
    """Find the catalog station closest to a decimal-degree coordinate.

    Full linear scan over the catalog. Each station's (degrees, minutes)
    pair is converted to decimal degrees before measuring. Ties resolve to
    the first station in catalog order.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        catalog: Station catalog (or any iterable of stations)

    Returns:
        NearestStation with the distance in km, or None for an empty catalog

    Example:
        >>> result = nearest_station(35.68, 139.77, catalog)
        >>> print(f"{result.station.name}: {result.distance_km:.1f} km")
    """
    stations = catalog.stations if isinstance(catalog, StationCatalog) else tuple(catalog)
    if not stations:
        return None

    count = len(stations)
    lats = np.fromiter((s.latitude for s in stations), dtype=np.float64, count=count)
    lons = np.fromiter((s.longitude for s in stations), dtype=np.float64, count=count)

    distances = _haversine_km(lat, lon, lats, lons)
    # argmin returns the first occurrence of the minimum
    best = int(np.argmin(distances))

    return NearestStation(station=stations[best], distance_km=float(distances[best]))


# ---------------------------------------------------------------------------
# Direction Binning
# ---------------------------------------------------------------------------
def octant_for_direction(direction_deg: float) -> CompassOctant:
    """Bin a direction in [0, 360) to its compass octant.

    Equivalent to round(direction / 45) mod 8 with halves rounded up, so
    [337.5, 360) and [0, 22.5) map to N and 22.5 itself maps to NE.
    """
    return CompassOctant.from_index(
        math.floor(direction_deg / OCTANT_WIDTH_DEG + 0.5) % OCTANT_COUNT
    )


def is_summer_month(month: int) -> bool:
    """June through September."""
    return month in SUMMER_MONTHS


def is_winter_month(month: int) -> bool:
    """December through February."""
    return month in WINTER_MONTHS


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------
def aggregate(
    samples: Iterable[DirectionalSample], month_predicate: MonthPredicate
) -> DirectionalHistogram:
    """Build a direction histogram from the samples of selected months.

    Samples slower than CALM_SPEED_THRESHOLD are calm: they have no
    meaningful direction and are left out entirely, including from
    total_count.

    Args:
        samples: Observations in any order
        month_predicate: Receives the sample month (1-12)

    Returns:
        DirectionalHistogram over the qualifying samples
    """
    positions = [
        octant_for_direction(sample.direction_deg).position
        for sample in samples
        if sample.speed >= CALM_SPEED_THRESHOLD
        and month_predicate(sample.timestamp.month)
    ]
    counts = np.bincount(np.asarray(positions, dtype=np.intp), minlength=OCTANT_COUNT)
    return DirectionalHistogram(
        counts=tuple(int(c) for c in counts), total_count=len(positions)
    )


def dominant_direction(histogram: DirectionalHistogram) -> CompassOctant | None:
    """Most frequent octant (lowest index on ties); None for an empty histogram."""
    return histogram.dominant_direction


# ---------------------------------------------------------------------------
# Opening Suitability
# ---------------------------------------------------------------------------
def _wind_adjustment(share: float, prevailing: int, frequent: int, w: SuitabilityWeights) -> int:
    if share > w.prevailing_share:
        return prevailing
    if share > w.frequent_share:
        return frequent
    return 0


def suitability_scores(
    summer_wind: DirectionalHistogram,
    winter_wind: DirectionalHistogram,
    weights: SuitabilityWeights = DEFAULT_SUITABILITY_WEIGHTS,
) -> Mapping[CompassOctant, int]:
    """Score each octant's suitability for large openings.

    Rewards winter solar gain and summer cross-ventilation, penalizes summer
    overheating and winter cold drafts. See SuitabilityWeights for the
    formula. An empty histogram contributes a 0 share for every octant.

    Returns:
        Read-only mapping of every octant, in compass order, to a score
        in [weights.min_score, weights.max_score]
    """
    scores: dict[CompassOctant, int] = {}
    for octant in CompassOctant:
        score = weights.base

        if octant in weights.winter_sun_octants:
            score += weights.winter_sun_bonus
        if octant in weights.morning_sun_octants:
            score += weights.morning_sun_bonus
        if octant in weights.summer_sun_octants:
            score -= weights.summer_sun_penalty

        score += _wind_adjustment(
            summer_wind.frequency(octant),
            weights.summer_wind_prevailing_bonus,
            weights.summer_wind_frequent_bonus,
            weights,
        )
        score -= _wind_adjustment(
            winter_wind.frequency(octant),
            weights.winter_wind_prevailing_penalty,
            weights.winter_wind_frequent_penalty,
            weights,
        )

        scores[octant] = max(weights.min_score, min(weights.max_score, score))
    return MappingProxyType(scores)


def analyze_passive_design(
    samples: Iterable[DirectionalSample],
    weights: SuitabilityWeights = DEFAULT_SUITABILITY_WEIGHTS,
) -> PassiveDesignAnalysis:
    """Seasonal wind histograms and opening suitability from one time series."""
    samples = tuple(samples)
    summer = aggregate(samples, is_summer_month)
    winter = aggregate(samples, is_winter_month)
    return PassiveDesignAnalysis(
        summer_wind=summer,
        winter_wind=winter,
        suitability=suitability_scores(summer, winter, weights),
    )
