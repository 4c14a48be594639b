"""
Front/rear tire pressure recommender.

Turns rider inputs into baseline per-wheel pressures and, when ambient
conditions are available, temperature/elevation compensated pressures.
"""

import logging
import math
from datetime import datetime
from typing import Optional

from tirerec import config
from tirerec.conditions.base import ConditionsProvider
from tirerec.conditions.exceptions import ConditionsError
from tirerec.models.inputs import AmbientConditions, Coordinates, RiderInputs
from tirerec.models.outputs import (
    CompensationResult,
    PressureRecommendation,
    WheelPressure,
)
from tirerec.physics.compensation import (
    ABSOLUTE_ZERO_C,
    elevation_in_model_range,
    recommend_compensated,
)
from tirerec.physics.pressure import compute_wheel_psi, split_load
from tirerec.physics.units import round_half_up, to_bar

logger = logging.getLogger(__name__)


class PressureRecommender:
    """
    Recommender for front/rear tire pressures.

    Baseline pressures are the primary result. Compensation is a secondary
    layer: if conditions are missing or unusable it reports itself as
    unavailable and the baseline stays valid.
    """

    def __init__(self, inputs: RiderInputs, provider: Optional[ConditionsProvider] = None):
        """
        Initialize recommender with rider inputs.

        Args:
            inputs: Rider and bike parameters
            provider: Optional source of ambient conditions for compensate_at()
        """
        self.inputs = inputs
        self.provider = provider

        # Pre-compute common values
        self.weight_lbs = inputs.weight_lbs
        self.front_load_lbs, self.rear_load_lbs = split_load(self.weight_lbs, inputs.weight_split)

    def _wheel(self, load_lbs: float) -> WheelPressure:
        raw = compute_wheel_psi(
            load_lbs,
            self.inputs.tire_width_mm,
            self.inputs.surface,
            self.inputs.speed,
            self.inputs.tire_type,
            self.inputs.wheel_diameter,
        )
        psi = round_half_up(raw)
        return WheelPressure(load_lbs=load_lbs, psi=psi, bar=to_bar(psi))

    def baseline(self) -> PressureRecommendation:
        """
        Compute baseline front/rear pressures.

        Returns:
            PressureRecommendation with whole-PSI values and BAR equivalents
        """
        front = self._wheel(self.front_load_lbs)
        rear = self._wheel(self.rear_load_lbs)

        input_summary = {
            "weight_lbs": round_half_up(self.weight_lbs, 1),
            "weight_split": self.inputs.weight_split.value,
            "tire_width_mm": self.inputs.tire_width_mm,
            "surface": self.inputs.surface.value,
            "speed": self.inputs.speed.value,
            "tire_type": self.inputs.tire_type.value,
            "wheel_diameter": self.inputs.wheel_diameter.value,
        }
        if self.inputs.preset is not None:
            input_summary["preset"] = self.inputs.preset.value

        assumptions = [
            f"Front/rear load split {self.inputs.weight_split.front:.1%} / {self.inputs.weight_split.rear:.1%}",
            "Tire width clamped to 20-90 mm before use",
            "Pressures clamped to 15-130 PSI and rounded to whole PSI",
            "Wheel diameter does not affect the baseline",
        ]

        warnings = []
        if not self.inputs.weight_valid:
            warnings.append(
                f"System weight {self.weight_lbs:.0f} lbs is outside the supported 75-450 lbs range"
            )
        if not 20 <= self.inputs.tire_width_mm <= 90:
            warnings.append(
                f"Tire width {self.inputs.tire_width_mm:g} mm is outside 20-90 mm and was clamped"
            )

        return PressureRecommendation(
            front=front,
            rear=rear,
            weight_lbs=self.weight_lbs,
            weight_valid=self.inputs.weight_valid,
            input_summary=input_summary,
            assumptions=assumptions,
            warnings=warnings,
        )

    def compensate(
        self,
        conditions: Optional[AmbientConditions],
        ref_temp_c: float = config.DEFAULT_REF_TEMP_C,
        keep_absolute_constant: bool = config.DEFAULT_KEEP_ABSOLUTE_CONSTANT,
    ) -> CompensationResult:
        """
        Compensate the baseline pressures for ambient conditions.

        Args:
            conditions: Resolved temperature and elevation, or None
            ref_temp_c: Temperature the baseline targets are tuned for
            keep_absolute_constant: Hold absolute pressure instead of gauge

        Returns:
            CompensationResult; unavailable when the data is missing,
            non-finite or out of model range, or the baseline itself is
            not usable
        """
        if conditions is None:
            return CompensationResult.unavailable("Ambient conditions unavailable")
        if not (math.isfinite(conditions.ambient_temp_c) and math.isfinite(conditions.elevation_m)):
            logger.warning("Compensation skipped: non-finite ambient conditions %s", conditions)
            return CompensationResult.unavailable("Ambient conditions incomplete")
        in_range = (
            elevation_in_model_range(conditions.elevation_m)
            and conditions.ambient_temp_c > ABSOLUTE_ZERO_C
        )
        if not in_range:
            logger.warning("Compensation skipped: conditions out of model range %s", conditions)
            return CompensationResult.unavailable("Ambient conditions outside the supported range")
        if not self.inputs.weight_valid:
            return CompensationResult.unavailable("System weight outside supported range")

        baseline = self.baseline()
        if baseline.front.psi <= 0 or baseline.rear.psi <= 0:
            return CompensationResult.unavailable("No baseline pressure to compensate")

        result = recommend_compensated(
            baseline.front.psi,
            baseline.rear.psi,
            ref_temp_c,
            conditions.ambient_temp_c,
            conditions.elevation_m,
            keep_absolute_constant,
        )
        return CompensationResult(
            available=True,
            ambient_temp_c=result.ambient_temp_c,
            elevation_m=result.elevation_m,
            ambient_pressure_psi=result.ambient_pressure_psi,
            front_psi=result.front_psi,
            rear_psi=result.rear_psi,
            ref_temp_c=ref_temp_c,
            keep_absolute_constant=keep_absolute_constant,
            note=result.note,
        )

    def compensate_at(
        self,
        coords: Coordinates,
        when: datetime,
        ref_temp_c: float = config.DEFAULT_REF_TEMP_C,
        keep_absolute_constant: bool = config.DEFAULT_KEEP_ABSOLUTE_CONSTANT,
    ) -> CompensationResult:
        """Fetch conditions from the injected provider, then compensate."""
        if self.provider is None:
            return CompensationResult.unavailable("No conditions provider configured")
        try:
            conditions = self.provider.get_conditions(coords, when)
        except ConditionsError as exc:
            logger.warning("Conditions lookup failed for %s at %s: %s", coords, when, exc)
            return CompensationResult.unavailable(str(exc) or "Weather adjustment failed")
        return self.compensate(conditions, ref_temp_c, keep_absolute_constant)
