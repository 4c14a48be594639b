"""
Tire Pressure & Wind Recommender (tirerec)

Recommends front/rear bicycle tire pressures from rider and bike
parameters, compensates them for ambient temperature and elevation, and
suggests riding headings that favor tailwind over crosswind.

Recommendations are heuristic starting points; adjust to feel and to the
tire and rim manufacturers' limits.

Usage:
    python -m tirerec make-example
    python -m tirerec pressure --input rider.json
    python -m tirerec compensate --input rider.json --temp 5 --elevation 300
    python -m tirerec wind --from 270 --speed 12
    python -m tirerec serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Tire Pressure Project"

from tirerec.models.inputs import RiderInputs, HeadingOptions, WindObservation
from tirerec.models.enums import Surface, Speed, TireType, WheelDiameter, WeightSplit, BikePreset
from tirerec.models.outputs import (
    PressureRecommendation,
    CompensationResult,
    HeadingRecommendation,
    RideRecommendation,
)
from tirerec.recommender import PressureRecommender, HeadingAdvisor, recommend_ride

__all__ = [
    "RiderInputs",
    "HeadingOptions",
    "WindObservation",
    "Surface",
    "Speed",
    "TireType",
    "WheelDiameter",
    "WeightSplit",
    "BikePreset",
    "PressureRecommendation",
    "CompensationResult",
    "HeadingRecommendation",
    "RideRecommendation",
    "PressureRecommender",
    "HeadingAdvisor",
    "recommend_ride",
]
