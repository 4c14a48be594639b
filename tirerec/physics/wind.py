"""
Wind geometry relative to a riding heading.

Wind direction is meteorological: the bearing the air comes FROM. The
vector it blows TOWARD is FROM + 180°. All angles are normalized into
[0, 360) before they are compared, and differences are wrapped into
[-180, 180).
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

COMPASS_16 = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

DEFAULT_CROSSWIND_PENALTY = 0.4


@dataclass
class HeadingScore:
    """Decomposition of the wind along one heading."""
    score: float            # tail - penalty * cross; higher is better
    tail_component: float   # + tailwind / - headwind, in wind speed units
    cross_component: float  # |crosswind|
    wind_toward_deg: float


@dataclass
class WindComponents:
    """Head/tail and crosswind split for a fixed rider heading."""
    headwind: float     # magnitude of the along-track component
    head_or_tail: str   # "headwind" or "tailwind"
    crosswind: float    # magnitude of the cross-track component
    side: str           # "left" or "right"


def normalize_deg(deg: float) -> float:
    """Normalize an angle into [0, 360)."""
    return ((deg % 360) + 360) % 360


def angle_diff(a: float, b: float) -> float:
    """Smallest signed angular difference a - b, in [-180, 180)."""
    d = normalize_deg(a) - normalize_deg(b)
    return ((d + 540) % 360) - 180


def bearing_to_compass(deg: float) -> str:
    """Round a bearing to the nearest of the 16 compass points."""
    index = math.floor(normalize_deg(deg) / 22.5 + 0.5) % 16
    return COMPASS_16[index]


def in_intervals(deg: float, ranges: Optional[Sequence[Sequence[float]]]) -> bool:
    """
    Check whether a bearing lies in any of the [start, end] intervals.

    An interval whose start is greater than its end wraps through 0°
    (e.g. 300..30). No intervals means every bearing is allowed.
    """
    if not ranges:
        return True
    d = normalize_deg(deg)
    for start, end in ranges:
        lo = normalize_deg(start)
        hi = normalize_deg(end)
        if lo <= hi:
            if lo <= d <= hi:
                return True
        elif d >= lo or d <= hi:
            return True
    return False


def _check_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number (got {value})")


def score_heading(
    wind_from_deg: float,
    wind_speed: float,
    heading_deg: float,
    crosswind_penalty: float = DEFAULT_CROSSWIND_PENALTY,
) -> HeadingScore:
    """
    Score a riding heading against the wind.

    tail = speed * cos(delta), cross = |speed * sin(delta)|, where delta is
    the signed difference between the heading and the wind's TOWARD vector.
    score = tail - crosswind_penalty * cross.
    """
    _check_finite(
        wind_from_deg=wind_from_deg,
        wind_speed=wind_speed,
        heading_deg=heading_deg,
        crosswind_penalty=crosswind_penalty,
    )
    wind_toward_deg = normalize_deg(wind_from_deg + 180)
    delta = math.radians(angle_diff(heading_deg, wind_toward_deg))
    tail = wind_speed * math.cos(delta)
    cross = abs(wind_speed * math.sin(delta))
    return HeadingScore(
        score=tail - crosswind_penalty * cross,
        tail_component=tail,
        cross_component=cross,
        wind_toward_deg=wind_toward_deg,
    )


def wind_components(wind_from_deg: float, heading_deg: float, speed: float) -> WindComponents:
    """
    Split the wind into head/tail and crosswind for a fixed heading.

    Uses the same wrapping as score_heading: the signed difference between
    the wind's FROM bearing and the heading decides both the head/tail sign
    and the side the crosswind comes from.
    """
    _check_finite(wind_from_deg=wind_from_deg, heading_deg=heading_deg, speed=speed)
    beta = angle_diff(wind_from_deg, heading_deg)
    alpha = math.radians(beta)
    headwind_signed = speed * math.cos(alpha)
    return WindComponents(
        headwind=abs(headwind_signed),
        head_or_tail="headwind" if headwind_signed >= 0 else "tailwind",
        crosswind=abs(speed * math.sin(alpha)),
        side="left" if beta < 0 else "right",
    )
