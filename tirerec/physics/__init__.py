"""
Physics and heuristics for tire pressure and wind recommendations.

This module provides:
- Baseline per-wheel pressure from load, width and ride categories
- Temperature/elevation compensation of gauge pressure
- Wind decomposition along a riding heading
- Unit conversions (pint-backed) and rounding helpers

All functions are pure and synchronous.
"""

from tirerec.physics.units import (
    ureg,
    Q_,
    PSI_PER_BAR,
    KPA_TO_PSI,
    kg_to_lbs,
    lbs_to_kg,
    celsius_to_kelvin,
    to_bar,
    kpa_to_psi,
    clamp,
    round_half_up,
)
from tirerec.physics.pressure import (
    K,
    SURFACE_MULT,
    SPEED_MULT,
    TIRE_TYPE_OFFSET,
    compute_wheel_psi,
    split_load,
)
from tirerec.physics.compensation import (
    ambient_pressure_at_elevation_kpa,
    ambient_pressure_at_elevation_psi,
    elevation_in_model_range,
    compensate_pressure_psi,
    recommend_compensated,
    CompensatedPressures,
)
from tirerec.physics.wind import (
    normalize_deg,
    angle_diff,
    bearing_to_compass,
    in_intervals,
    score_heading,
    wind_components,
    HeadingScore,
    WindComponents,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "PSI_PER_BAR",
    "KPA_TO_PSI",
    "kg_to_lbs",
    "lbs_to_kg",
    "celsius_to_kelvin",
    "to_bar",
    "kpa_to_psi",
    "clamp",
    "round_half_up",
    # Baseline pressure
    "K",
    "SURFACE_MULT",
    "SPEED_MULT",
    "TIRE_TYPE_OFFSET",
    "compute_wheel_psi",
    "split_load",
    # Compensation
    "ambient_pressure_at_elevation_kpa",
    "ambient_pressure_at_elevation_psi",
    "elevation_in_model_range",
    "compensate_pressure_psi",
    "recommend_compensated",
    "CompensatedPressures",
    # Wind
    "normalize_deg",
    "angle_diff",
    "bearing_to_compass",
    "in_intervals",
    "score_heading",
    "wind_components",
    "HeadingScore",
    "WindComponents",
]
