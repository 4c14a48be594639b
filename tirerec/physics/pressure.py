"""
Baseline tire pressure heuristic.

Maps a per-wheel load and tire/ride categories to a gauge pressure:

    psi = K * load / width
    psi *= 1 + surface offset
    psi *= 1 + speed offset
    psi += tire construction offset
    psi = clamp(psi, 15, 130)

The order of operations is fixed; reordering changes the output.

ASSUMPTIONS:
- Pressure scales linearly with load per unit of tire width
- Smoother surfaces and faster riding call for more pressure
- Stiffer/puncture-resistant casings need extra pressure for the same feel
- Wheel diameter is accepted but not used
"""

import math
from typing import Optional, Union

from tirerec.models.enums import Speed, Surface, TireType, WeightSplit, WheelDiameter
from tirerec.physics.units import clamp

# Tunable scaling constant for the baseline pressure proxy
K = 20

MIN_TIRE_WIDTH_MM = 20.0
MAX_TIRE_WIDTH_MM = 90.0
MIN_PSI = 15.0
MAX_PSI = 130.0

# Fractional offsets applied as psi *= (1 + offset)
SURFACE_MULT: dict[Surface, float] = {
    Surface.TRACK_INDOOR_WOOD: +0.2,
    Surface.TRACK_OUTDOOR_CONCRETE: +0.15,
    Surface.NEW_PAVEMENT: +0.05,
    Surface.WORN_PAVEMENT: 0.0,
    Surface.POOR_PAVEMENT: -0.1,
    Surface.COBBLESTONE: -0.2,
    Surface.GRAVEL_CAT_1: -0.25,
    Surface.GRAVEL_CAT_2: -0.35,
    Surface.GRAVEL_CAT_3: -0.45,
    Surface.GRAVEL_CAT_4: -0.55,
}

SPEED_MULT: dict[Speed, float] = {
    Speed.RECREATIONAL: -0.05,
    Speed.MODERATE_GROUP: 0.0,
    Speed.FAST_GROUP: 0.03,
    Speed.RACING: 0.05,
    Speed.PRO_TOUR: 0.07,
    Speed.FAST_SINGLE_TRACK: 0.03,
}

# Additive PSI by casing
TIRE_TYPE_OFFSET: dict[TireType, float] = {
    TireType.HIGH_PERFORMANCE: 0.0,
    TireType.MID_RANGE_TUBELESS: 2.0,
    TireType.MID_RANGE_BUTYL: 5.0,
    TireType.PUNCTURE_RESISTANT: 7.0,
}

assert set(SURFACE_MULT) == set(Surface), "SURFACE_MULT must cover every Surface"
assert set(SPEED_MULT) == set(Speed), "SPEED_MULT must cover every Speed"
assert set(TIRE_TYPE_OFFSET) == set(TireType), "TIRE_TYPE_OFFSET must cover every TireType"


def compute_wheel_psi(
    load_lbs: float,
    tire_width_mm: float,
    surface: Union[Surface, str],
    speed: Union[Speed, str],
    tire_type: Union[TireType, str],
    wheel_diameter: Optional[Union[WheelDiameter, str]] = None,
) -> float:
    """
    Compute a single wheel's gauge pressure from the baseline heuristic.

    Args:
        load_lbs: Load carried by this wheel in pounds (>= 0)
        tire_width_mm: Tire width; silently clamped to [20, 90] mm
        surface: Road-surface category
        speed: Riding-speed category
        tire_type: Tire construction category
        wheel_diameter: Reserved for future use

    Returns:
        Pressure in PSI, clamped to [15, 130]. Not rounded.

    Raises:
        ValueError: negative or non-finite load, non-finite width, or a
            category value outside its enumeration
    """
    if not math.isfinite(load_lbs) or load_lbs < 0:
        raise ValueError(f"Wheel load must be a finite, non-negative number (got {load_lbs})")
    if not math.isfinite(tire_width_mm):
        raise ValueError(f"Tire width must be finite (got {tire_width_mm})")

    surface = Surface(surface)
    speed = Speed(speed)
    tire_type = TireType(tire_type)
    if wheel_diameter is not None:
        WheelDiameter(wheel_diameter)

    safe_width_mm = clamp(tire_width_mm, MIN_TIRE_WIDTH_MM, MAX_TIRE_WIDTH_MM)
    psi = K * (load_lbs / safe_width_mm)
    psi *= 1 + SURFACE_MULT[surface]
    psi *= 1 + SPEED_MULT[speed]
    psi += TIRE_TYPE_OFFSET[tire_type]
    return clamp(psi, MIN_PSI, MAX_PSI)


def split_load(weight_lbs: float, split: Union[WeightSplit, str]) -> tuple[float, float]:
    """
    Split a total system weight into front and rear wheel loads.

    Returns:
        Tuple of (front_lbs, rear_lbs)
    """
    split = WeightSplit(split)
    return (weight_lbs * split.front, weight_lbs * split.rear)
