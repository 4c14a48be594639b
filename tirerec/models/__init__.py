"""
Pydantic models for tire pressure and heading recommender inputs and outputs.
"""

from tirerec.models.enums import (
    Surface,
    Speed,
    TireType,
    WheelDiameter,
    WeightUnit,
    WindUnit,
    WeightSplit,
    BikePreset,
)
from tirerec.models.inputs import (
    WheelLoadInput,
    RiderInputs,
    Coordinates,
    AmbientConditions,
    CompensationInput,
    WindObservation,
    HeadingOptions,
)
from tirerec.models.outputs import (
    WheelPressure,
    PressureRecommendation,
    CompensationResult,
    HeadingCandidate,
    HeadingRecommendation,
    WindBreakdown,
    RideRecommendation,
)

__all__ = [
    "Surface",
    "Speed",
    "TireType",
    "WheelDiameter",
    "WeightUnit",
    "WindUnit",
    "WeightSplit",
    "BikePreset",
    "WheelLoadInput",
    "RiderInputs",
    "Coordinates",
    "AmbientConditions",
    "CompensationInput",
    "WindObservation",
    "HeadingOptions",
    "WheelPressure",
    "PressureRecommendation",
    "CompensationResult",
    "HeadingCandidate",
    "HeadingRecommendation",
    "WindBreakdown",
    "RideRecommendation",
]
