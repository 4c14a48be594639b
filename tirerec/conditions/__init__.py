"""
Ride-conditions collaborators.

Fetch ambient temperature, elevation and wind for a place and time. The
core calculations never call these; callers resolve conditions first and
pass plain numbers in, or inject a provider into the recommender.
"""

from tirerec.conditions.base import ConditionsProvider, StaticConditionsProvider
from tirerec.conditions.exceptions import (
    ConditionsError,
    ConditionsAPIError,
    ConditionsConnectionError,
    ConditionsTimeoutError,
    ConditionsDataError,
)
from tirerec.conditions.open_meteo import (
    OpenMeteoClient,
    nearest_hourly_index,
    parse_hourly_times,
)

__all__ = [
    "ConditionsProvider",
    "StaticConditionsProvider",
    "ConditionsError",
    "ConditionsAPIError",
    "ConditionsConnectionError",
    "ConditionsTimeoutError",
    "ConditionsDataError",
    "OpenMeteoClient",
    "nearest_hourly_index",
    "parse_hourly_times",
]
