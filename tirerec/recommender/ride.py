"""
Whole-ride recommendation: pressures, compensation and headings.

The timestamp is an explicit argument so every lookup in one
recommendation refers to the same instant.
"""

import logging
from datetime import datetime
from typing import Optional

from tirerec import config
from tirerec.conditions.base import ConditionsProvider
from tirerec.conditions.exceptions import ConditionsError
from tirerec.models.enums import WindUnit
from tirerec.models.inputs import Coordinates, HeadingOptions, RiderInputs
from tirerec.models.outputs import CompensationResult, RideRecommendation
from tirerec.recommender.pressures import PressureRecommender
from tirerec.recommender.wind import HeadingAdvisor

logger = logging.getLogger(__name__)


def recommend_ride(
    inputs: RiderInputs,
    provider: Optional[ConditionsProvider],
    coords: Optional[Coordinates],
    when: datetime,
    options: Optional[HeadingOptions] = None,
    wind_unit: WindUnit = WindUnit.MPH,
    route_heading_deg: Optional[float] = None,
    ref_temp_c: float = config.DEFAULT_REF_TEMP_C,
    keep_absolute_constant: bool = config.DEFAULT_KEEP_ABSOLUTE_CONSTANT,
) -> RideRecommendation:
    """
    Build a complete ride recommendation.

    Args:
        inputs: Rider and bike parameters
        provider: Source of conditions and wind; None skips both
        coords: Where the ride starts; None skips both lookups
        when: The instant to look conditions up for
        options: Heading search options
        wind_unit: Unit to request wind speed in
        route_heading_deg: Optional fixed course for a wind breakdown
        ref_temp_c: Reference temperature of the baseline targets
        keep_absolute_constant: Compensation mode flag

    Returns:
        RideRecommendation; compensation and headings degrade to
        unavailable independently of each other
    """
    recommender = PressureRecommender(inputs, provider)
    advisor = HeadingAdvisor(options)
    pressures = recommender.baseline()

    if provider is None or coords is None:
        compensation = CompensationResult.unavailable("No location or conditions provider")
        observation = None
    else:
        compensation = recommender.compensate_at(coords, when, ref_temp_c, keep_absolute_constant)
        try:
            observation = provider.get_wind(coords, when, wind_unit)
        except ConditionsError as exc:
            logger.warning("Wind lookup failed for %s at %s: %s", coords, when, exc)
            observation = None

    return RideRecommendation(
        when=when,
        pressures=pressures,
        compensation=compensation,
        headings=advisor.recommend(observation),
        wind_breakdown=advisor.breakdown(observation, route_heading_deg),
    )
