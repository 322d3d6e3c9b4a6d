"""Climate Bounded Context - Named Constants.

Single home for the calm threshold, season definitions and the opening
suitability weights. Values are fixed for compatibility with published
reports; alternative weights can be passed explicitly.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from domain.climate.value_objects import CompassOctant

EARTH_RADIUS_KM = 6371.0  # Mean radius used by the haversine formula

CALM_SPEED_THRESHOLD = 1.0  # Samples slower than this carry no direction
OCTANT_WIDTH_DEG = 45.0

SUMMER_MONTHS = frozenset({6, 7, 8, 9})
WINTER_MONTHS = frozenset({12, 1, 2})


class SuitabilityWeights(BaseModel):
    """Weights of the large-opening suitability heuristic.

    score = base
          + winter_sun_bonus      for octants receiving low winter sun
          + morning_sun_bonus     for east
          - summer_sun_penalty    for octants exposed to low summer sun
          + summer wind bonus     by the octant's share of summer wind
          - winter wind penalty   by the octant's share of winter wind
    clamped to [min_score, max_score]. Shares are compared with strict
    ``>`` against prevailing_share first, then frequent_share.
    """

    base: int = 50
    winter_sun_octants: frozenset[CompassOctant] = frozenset(
        {CompassOctant.S, CompassOctant.SE, CompassOctant.SW}
    )
    winter_sun_bonus: int = 30
    morning_sun_octants: frozenset[CompassOctant] = frozenset({CompassOctant.E})
    morning_sun_bonus: int = 10
    summer_sun_octants: frozenset[CompassOctant] = frozenset(
        {CompassOctant.W, CompassOctant.NW, CompassOctant.SW}
    )
    summer_sun_penalty: int = 20

    prevailing_share: float = 0.15
    frequent_share: float = 0.10
    summer_wind_prevailing_bonus: int = 20
    summer_wind_frequent_bonus: int = 10
    winter_wind_prevailing_penalty: int = 20
    winter_wind_frequent_penalty: int = 10

    min_score: int = 0
    max_score: int = 100

    model_config = ConfigDict(frozen=True)


DEFAULT_SUITABILITY_WEIGHTS = SuitabilityWeights()
