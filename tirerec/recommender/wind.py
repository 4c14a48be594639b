"""
Heading advice for an observed wind.

Wraps the heading scorer with the "no wind data" handling: a missing or
non-finite observation yields an unavailable recommendation, never an
exception or NaN.
"""

import logging
import math
from typing import Optional

from tirerec.models.inputs import HeadingOptions, WindObservation
from tirerec.models.outputs import HeadingRecommendation, WindBreakdown
from tirerec.physics.wind import bearing_to_compass, normalize_deg, wind_components
from tirerec.scoring.headings import HeadingScorer

logger = logging.getLogger(__name__)

NO_WIND_DATA = "No wind data available."


class HeadingAdvisor:
    """Builds heading recommendations and route wind breakdowns."""

    def __init__(self, options: Optional[HeadingOptions] = None):
        self.options = options or HeadingOptions()

    def recommend(self, observation: Optional[WindObservation]) -> HeadingRecommendation:
        """Rank headings for the observation, or report that there is no data."""
        if observation is None or not observation.has_data:
            logger.info("Heading recommendation unavailable: %s", observation)
            return HeadingRecommendation(available=False, message=NO_WIND_DATA)

        scorer = HeadingScorer(observation.direction_deg, observation.speed, self.options)
        toward = normalize_deg(observation.direction_deg + 180)
        gust = observation.gust
        return HeadingRecommendation(
            available=True,
            wind_from_deg=normalize_deg(observation.direction_deg),
            wind_from_label=bearing_to_compass(observation.direction_deg),
            wind_toward_deg=toward,
            wind_toward_label=bearing_to_compass(toward),
            wind_speed=observation.speed,
            gust=gust if gust is not None and math.isfinite(gust) else None,
            unit=observation.unit.value,
            time=observation.time,
            candidates=scorer.recommend(),
        )

    def breakdown(
        self,
        observation: Optional[WindObservation],
        route_heading_deg: Optional[float],
    ) -> Optional[WindBreakdown]:
        """Head/tail and crosswind for a fixed route heading; None without data."""
        if observation is None or not observation.has_data:
            return None
        if route_heading_deg is None or not math.isfinite(route_heading_deg):
            return None
        comp = wind_components(observation.direction_deg, route_heading_deg, observation.speed)
        return WindBreakdown(
            route_heading_deg=route_heading_deg,
            head_or_tail=comp.head_or_tail,
            headwind=comp.headwind,
            crosswind=comp.crosswind,
            side=comp.side,
            unit=observation.unit.value,
        )
