"""
Output models for pressure, compensation and heading recommendations.

Unavailable results carry a reason instead of numbers; no NaN ever
reaches these models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WheelPressure(BaseModel):
    """Recommended pressure for one wheel."""
    load_lbs: float = Field(..., ge=0, description="Load carried by the wheel")
    psi: float = Field(..., ge=15, le=130, description="Gauge pressure, whole PSI")
    bar: float = Field(..., ge=0, description="Gauge pressure in BAR")


class PressureRecommendation(BaseModel):
    """Baseline front/rear pressure recommendation."""
    front: WheelPressure
    rear: WheelPressure
    weight_lbs: float = Field(..., description="System weight used, in pounds")
    weight_valid: bool = Field(..., description="Whether the weight is in the supported range")
    input_summary: dict = Field(default_factory=dict)
    assumptions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class CompensationResult(BaseModel):
    """
    Temperature/elevation adjusted pressures.

    When available is False only reason is set, and the baseline pressures
    remain the valid recommendation.
    """
    available: bool
    reason: Optional[str] = None
    ambient_temp_c: Optional[float] = None
    elevation_m: Optional[float] = None
    ambient_pressure_psi: Optional[float] = Field(default=None, description="Rounded to 0.01 PSI")
    front_psi: Optional[float] = Field(default=None, description="Rounded to 0.1 PSI")
    rear_psi: Optional[float] = Field(default=None, description="Rounded to 0.1 PSI")
    ref_temp_c: Optional[float] = None
    keep_absolute_constant: bool = False
    note: Optional[str] = None

    @classmethod
    def unavailable(cls, reason: str) -> "CompensationResult":
        return cls(available=False, reason=reason)


class HeadingCandidate(BaseModel):
    """One recommended riding heading."""
    heading_deg: float = Field(..., ge=0, lt=360, description="Bearing to ride toward")
    heading_label: str = Field(..., description="16-point compass label")
    score: float = Field(..., description="tail - penalty * cross; higher is better")
    tail_component: float = Field(..., description="+tailwind / -headwind")
    cross_component: float = Field(..., ge=0, description="|crosswind|")
    wind_toward_deg: float = Field(..., ge=0, lt=360)


class HeadingRecommendation(BaseModel):
    """Ranked heading suggestions for the observed wind."""
    available: bool
    message: Optional[str] = None
    wind_from_deg: Optional[float] = None
    wind_from_label: Optional[str] = None
    wind_toward_deg: Optional[float] = None
    wind_toward_label: Optional[str] = None
    wind_speed: Optional[float] = None
    gust: Optional[float] = None
    unit: Optional[str] = None
    time: Optional[datetime] = None
    candidates: list[HeadingCandidate] = Field(default_factory=list)

    @property
    def best(self) -> Optional[HeadingCandidate]:
        """Top-ranked candidate, if any."""
        return self.candidates[0] if self.candidates else None


class WindBreakdown(BaseModel):
    """Head/tail and crosswind for a fixed route heading."""
    route_heading_deg: float
    head_or_tail: str = Field(..., description="'headwind' or 'tailwind'")
    headwind: float = Field(..., ge=0, description="Along-track magnitude")
    crosswind: float = Field(..., ge=0, description="Cross-track magnitude")
    side: str = Field(..., description="'left' or 'right'")
    unit: Optional[str] = None


class RideRecommendation(BaseModel):
    """Pressures, compensation and heading advice for one ride."""
    when: datetime
    pressures: PressureRecommendation
    compensation: CompensationResult
    headings: HeadingRecommendation
    wind_breakdown: Optional[WindBreakdown] = None
