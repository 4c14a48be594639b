"""
Temperature and elevation compensation for tire pressure.

Provides simplified models for:
- Ambient (atmospheric) pressure from elevation
- Ideal-gas scaling of absolute tire pressure with temperature
- Front/rear recommendation with output rounding

ASSUMPTIONS:
- Simplified International Standard Atmosphere, valid to roughly 11 km
- Tire volume is constant (no casing stretch with pressure)
- Gauge readings are relative to the current ambient pressure
"""

import math
from dataclasses import dataclass

from tirerec.physics.units import celsius_to_kelvin, kpa_to_psi, round_half_up

SEA_LEVEL_PRESSURE_KPA = 101.325
ISA_LAPSE_COEFF = 2.25577e-5
ISA_EXPONENT = 5.25588

# The ISA relation has no real value at or above this height
MAX_MODEL_ELEVATION_M = 1 / ISA_LAPSE_COEFF

ABSOLUTE_ZERO_C = -273.15

GAUGE_CONSTANT_NOTE = "Gauge-constant mode: temperature-compensated; gauge target stays intuitive."
ABSOLUTE_CONSTANT_NOTE = "Absolute-pressure mode: holding absolute constant; gauge varies with altitude."


@dataclass
class CompensatedPressures:
    """Result of a front/rear compensation, rounded for display."""
    front_psi: float           # 1 decimal place
    rear_psi: float            # 1 decimal place
    ambient_pressure_psi: float  # 2 decimal places
    ambient_temp_c: float
    elevation_m: float
    note: str


def _check_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number (got {value})")


def elevation_in_model_range(elevation_m: float) -> bool:
    """Whether the ISA relation gives a real, positive pressure at this elevation."""
    return math.isfinite(elevation_m) and 1 - ISA_LAPSE_COEFF * elevation_m > 0


def ambient_pressure_at_elevation_kpa(elevation_m: float) -> float:
    """
    Ambient pressure at an elevation using the simplified ISA relation.

    P = 101.325 * (1 - 2.25577e-5 * h)^5.25588   [kPa]

    Args:
        elevation_m: Elevation above sea level in meters

    Returns:
        Pressure in kPa (exactly 101.325 at sea level)

    Raises:
        ValueError: non-finite elevation, or one at or above MAX_MODEL_ELEVATION_M
    """
    _check_finite(elevation_m=elevation_m)
    if not elevation_in_model_range(elevation_m):
        raise ValueError(
            f"Elevation {elevation_m:g} m is beyond the atmosphere model (< {MAX_MODEL_ELEVATION_M:.0f} m)"
        )
    return SEA_LEVEL_PRESSURE_KPA * (1 - ISA_LAPSE_COEFF * elevation_m) ** ISA_EXPONENT


def ambient_pressure_at_elevation_psi(elevation_m: float) -> float:
    """Ambient pressure at an elevation, in PSI."""
    return kpa_to_psi(ambient_pressure_at_elevation_kpa(elevation_m))


def compensate_pressure_psi(
    gauge_psi_ref: float,
    ref_temp_c: float,
    ambient_temp_c: float,
    ambient_pressure_psi: float,
    keep_absolute_constant: bool = False,
) -> float:
    """
    Compensate a gauge pressure target for the current temperature.

    Gauge-constant mode (default) scales the absolute pressure by
    T_now / T_ref so the tire reaches the tuned target once it settles to
    ambient:

        P_abs_now = (P_gauge_ref + P_atm) * (T_now / T_ref)
        P_gauge_now = P_abs_now - P_atm

    Absolute-constant mode holds the reference absolute pressure and only
    re-expresses it as gauge against the current ambient.

    Args:
        gauge_psi_ref: Gauge target at the reference temperature (PSI)
        ref_temp_c: Temperature the target was tuned at (°C)
        ambient_temp_c: Current ambient temperature (°C)
        ambient_pressure_psi: Current ambient absolute pressure (PSI)
        keep_absolute_constant: Select absolute-constant mode

    Returns:
        Gauge pressure to set now (PSI), unrounded and unclamped
    """
    _check_finite(
        gauge_psi_ref=gauge_psi_ref,
        ref_temp_c=ref_temp_c,
        ambient_temp_c=ambient_temp_c,
        ambient_pressure_psi=ambient_pressure_psi,
    )
    t_ref = celsius_to_kelvin(ref_temp_c)
    t_now = celsius_to_kelvin(ambient_temp_c)
    if t_ref <= 0 or t_now <= 0:
        raise ValueError("Temperatures must be above absolute zero")

    p_abs_ref = gauge_psi_ref + ambient_pressure_psi

    if keep_absolute_constant:
        return p_abs_ref - ambient_pressure_psi

    p_abs_now = p_abs_ref * (t_now / t_ref)
    return p_abs_now - ambient_pressure_psi


def recommend_compensated(
    front_psi_ref: float,
    rear_psi_ref: float,
    ref_temp_c: float,
    ambient_temp_c: float,
    elevation_m: float,
    keep_absolute_constant: bool = False,
) -> CompensatedPressures:
    """
    Compensate front and rear targets for ambient temperature and elevation.

    Front/rear pressures round to one decimal place and the ambient pressure
    to two; nothing is rounded before this point.
    """
    ambient_psi = ambient_pressure_at_elevation_psi(elevation_m)

    front = compensate_pressure_psi(
        front_psi_ref, ref_temp_c, ambient_temp_c, ambient_psi, keep_absolute_constant
    )
    rear = compensate_pressure_psi(
        rear_psi_ref, ref_temp_c, ambient_temp_c, ambient_psi, keep_absolute_constant
    )

    return CompensatedPressures(
        front_psi=round_half_up(front, 1),
        rear_psi=round_half_up(rear, 1),
        ambient_pressure_psi=round_half_up(ambient_psi, 2),
        ambient_temp_c=ambient_temp_c,
        elevation_m=elevation_m,
        note=ABSOLUTE_CONSTANT_NOTE if keep_absolute_constant else GAUGE_CONSTANT_NOTE,
    )
