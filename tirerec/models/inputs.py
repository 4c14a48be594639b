"""
Input models for rider, bike and ride-condition parameters.

The categorical fields are closed enumerations. A value outside an
enumeration is a caller error and fails validation immediately.
"""

import math
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from tirerec import config
from tirerec.models.enums import (
    BikePreset,
    Speed,
    Surface,
    TireType,
    WeightSplit,
    WeightUnit,
    WheelDiameter,
    WindUnit,
)
from tirerec.physics.units import kg_to_lbs

MIN_SYSTEM_WEIGHT_LBS = config.MIN_SYSTEM_WEIGHT_LBS
MAX_SYSTEM_WEIGHT_LBS = config.MAX_SYSTEM_WEIGHT_LBS


def _require_finite(v: float) -> float:
    if not math.isfinite(v):
        raise ValueError("value must be a finite number")
    return v


class WheelLoadInput(BaseModel):
    """Parameters for a single wheel's baseline pressure."""
    load_lbs: float = Field(..., ge=0, description="Load carried by the wheel in pounds")
    tire_width_mm: float = Field(..., description="Tire width in mm (clamped to 20-90 internally)")
    surface: Surface
    speed: Speed
    tire_type: TireType
    wheel_diameter: WheelDiameter = Field(
        default=WheelDiameter.D700C_29,
        description="Reserved for future use",
    )

    _finite = field_validator("load_lbs", "tire_width_mm")(_require_finite)


class RiderInputs(BaseModel):
    """
    Rider and bike parameters for a front/rear pressure recommendation.

    Selecting a preset sets the surface and weight split, and sets the tire
    width only when no width was given explicitly.
    """

    system_weight: float = Field(
        default=180.0,
        gt=0,
        description="Rider + bike + kit weight, in weight_unit",
    )
    weight_unit: WeightUnit = Field(default=WeightUnit.LBS)
    surface: Surface = Field(default=Surface.WORN_PAVEMENT)
    tire_width_mm: float = Field(default=28.0, description="Tire width in mm (clamped to 20-90)")
    wheel_diameter: WheelDiameter = Field(default=WheelDiameter.D700C_29)
    tire_type: TireType = Field(default=TireType.HIGH_PERFORMANCE)
    speed: Speed = Field(default=Speed.MODERATE_GROUP)
    weight_split: WeightSplit = Field(default=WeightSplit.ROAD)
    preset: Optional[BikePreset] = Field(default=None)

    _finite = field_validator("system_weight", "tire_width_mm")(_require_finite)

    @model_validator(mode="before")
    @classmethod
    def apply_preset(cls, data):
        """Fill surface, split and (if absent) width from the preset."""
        if not isinstance(data, dict) or data.get("preset") in (None, ""):
            return data
        preset = BikePreset(data["preset"])
        data = dict(data)
        data["surface"] = preset.surface
        data["weight_split"] = preset.weight_split
        if data.get("tire_width_mm") is None:
            data["tire_width_mm"] = preset.default_width_mm
        return data

    @property
    def weight_lbs(self) -> float:
        """System weight in pounds."""
        if self.weight_unit == WeightUnit.KG:
            return kg_to_lbs(self.system_weight)
        return self.system_weight

    @property
    def weight_valid(self) -> bool:
        """Whether the system weight falls in the supported range."""
        return MIN_SYSTEM_WEIGHT_LBS <= self.weight_lbs <= MAX_SYSTEM_WEIGHT_LBS

    model_config = {
        "json_schema_extra": {
            "example": {
                "system_weight": 180,
                "weight_unit": "lbs",
                "surface": "Worn Pavement / Some Cracks",
                "tire_width_mm": 28,
                "wheel_diameter": '700C/29"',
                "tire_type": "High performance tire tubeless/latex tube",
                "speed": "Moderate Group Ride",
                "weight_split": "48/52 (Road Bikes)",
            }
        }
    }


class Coordinates(BaseModel):
    """A latitude/longitude pair."""
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class AmbientConditions(BaseModel):
    """
    Resolved ambient conditions for pressure compensation.

    Values may be NaN when the upstream source had no sample; the
    recommender treats that as missing data.
    """
    ambient_temp_c: float
    elevation_m: float
    coords: Optional[Coordinates] = None
    time: Optional[datetime] = None


class CompensationInput(BaseModel):
    """Reference pressures and mode for temperature/elevation compensation."""
    front_psi_ref: float = Field(..., description="Front gauge target at ref_temp_c")
    rear_psi_ref: float = Field(..., description="Rear gauge target at ref_temp_c")
    ref_temp_c: float = Field(default=20.0, description="Temperature the targets were tuned at")
    ambient_temp_c: float
    elevation_m: float
    keep_absolute_constant: bool = Field(
        default=False,
        description="Hold absolute pressure constant instead of scaling with temperature",
    )


class WindObservation(BaseModel):
    """
    A single wind sample.

    direction_deg is meteorological: the bearing the wind blows FROM.
    """
    direction_deg: float
    speed: float
    gust: Optional[float] = None
    unit: WindUnit = Field(default=WindUnit.MPH)
    time: Optional[datetime] = None

    model_config = {"frozen": True}

    @property
    def has_data(self) -> bool:
        return math.isfinite(self.direction_deg) and math.isfinite(self.speed)


class HeadingOptions(BaseModel):
    """Search options for heading recommendations."""
    resolution_deg: float = Field(default=config.DEFAULT_RESOLUTION_DEG, gt=0, description="Lattice step in degrees")
    crosswind_penalty: float = Field(default=config.DEFAULT_CROSSWIND_PENALTY, ge=0, description="Weight on crosswind")
    allowed_headings: Optional[list[tuple[float, float]]] = Field(
        default=None,
        description="Restrict the search to [start, end] intervals (may wrap through 0)",
    )
    min_separation_deg: float = Field(default=config.DEFAULT_MIN_SEPARATION_DEG, ge=0)
    top_k: int = Field(default=config.DEFAULT_TOP_K, ge=0)
