"""Interface for injected ride-conditions providers."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from tirerec.conditions.exceptions import ConditionsDataError
from tirerec.models.enums import WindUnit
from tirerec.models.inputs import AmbientConditions, Coordinates, WindObservation


class ConditionsProvider(Protocol):
    """
    Supplies ambient temperature, elevation and wind for a place and time.

    Implementations are best-effort and may raise ConditionsError; the
    recommender turns any such failure into an unavailable result.
    """

    def get_conditions(self, coords: Coordinates, when: datetime) -> AmbientConditions:
        ...

    def get_wind(self, coords: Coordinates, when: datetime, unit: WindUnit) -> WindObservation:
        ...


class StaticConditionsProvider:
    """Provider that returns fixed, already-known conditions."""

    def __init__(self, conditions: AmbientConditions | None = None, wind: WindObservation | None = None) -> None:
        self._conditions = conditions
        self._wind = wind

    def get_conditions(self, coords: Coordinates, when: datetime) -> AmbientConditions:
        if self._conditions is None:
            raise ConditionsDataError("No ambient conditions configured")
        return self._conditions

    def get_wind(self, coords: Coordinates, when: datetime, unit: WindUnit) -> WindObservation:
        if self._wind is None:
            raise ConditionsDataError("No wind observation configured")
        return self._wind
