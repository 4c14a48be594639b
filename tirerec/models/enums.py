"""
Closed enumerations for the categorical rider, bike and wind inputs.

Every member of Surface, Speed and TireType must have a coefficient in
tirerec.physics.pressure; that module asserts it at import time.
"""

from enum import Enum


class Surface(str, Enum):
    """Road-surface category."""
    TRACK_INDOOR_WOOD = "Track (Indoor Wood)"
    TRACK_OUTDOOR_CONCRETE = "Track (Outdoor Concrete)"
    NEW_PAVEMENT = "New Pavement"
    WORN_PAVEMENT = "Worn Pavement / Some Cracks"
    POOR_PAVEMENT = "Poor Pavement / Chipseal"
    COBBLESTONE = "Cobblestone"
    GRAVEL_CAT_1 = "Category 1 Gravel"
    GRAVEL_CAT_2 = "Category 2 Gravel"
    GRAVEL_CAT_3 = "Category 3 Gravel"
    GRAVEL_CAT_4 = "Category 4 Gravel"


class Speed(str, Enum):
    """Riding-speed / intensity category."""
    RECREATIONAL = "Recreational"
    MODERATE_GROUP = "Moderate Group Ride"
    FAST_GROUP = "Fast Group Ride"
    RACING = "Cat. 1 / Cat. 2 / Cat. 3 Racing"
    PRO_TOUR = "Pro Tour"
    FAST_SINGLE_TRACK = "Fast Single Track"


class TireType(str, Enum):
    """Tire construction category."""
    HIGH_PERFORMANCE = "High performance tire tubeless/latex tube"
    MID_RANGE_TUBELESS = "Mid Range casing tubeless/latex tube"
    MID_RANGE_BUTYL = "Mid-Range casing butyl tube"
    PUNCTURE_RESISTANT = "Puncture resistant tire tubeless/latex tube"


class WheelDiameter(str, Enum):
    """Wheel diameter category (reserved; not used by the pressure formula)."""
    D700C_29 = '700C/29"'
    D650C = "650C"
    D650B_275 = '650B/27.5"'
    D26 = '26"'


class WeightUnit(str, Enum):
    """Unit the system weight is entered in."""
    LBS = "lbs"
    KG = "kg"


class WindUnit(str, Enum):
    """Wind speed unit as understood by the weather service."""
    MPH = "mph"
    KMH = "kmh"
    MS = "ms"
    KN = "kn"


class WeightSplit(str, Enum):
    """Front/rear weight distribution by bike category."""
    EVEN = "50/50 (Triathlon/TT/Track Bikes)"
    ROAD = "48/52 (Road Bikes)"
    GRAVEL = "47/53 (Gravel Bikes)"
    MOUNTAIN = "46.5/53.5 (Mountain Bikes)"

    @property
    def front(self) -> float:
        return _SPLIT_FRACTIONS[self][0]

    @property
    def rear(self) -> float:
        return _SPLIT_FRACTIONS[self][1]


_SPLIT_FRACTIONS = {
    WeightSplit.EVEN: (0.5, 0.5),
    WeightSplit.ROAD: (0.48, 0.52),
    WeightSplit.GRAVEL: (0.47, 0.53),
    WeightSplit.MOUNTAIN: (0.465, 0.535),
}


class BikePreset(str, Enum):
    """Bike presets that fill in surface, weight split and default width."""
    ROAD = "Road"
    GRAVEL = "Gravel"
    MTB = "MTB"

    @property
    def surface(self) -> Surface:
        return _PRESETS[self][0]

    @property
    def weight_split(self) -> WeightSplit:
        return _PRESETS[self][1]

    @property
    def default_width_mm(self) -> float:
        return _PRESETS[self][2]


_PRESETS = {
    BikePreset.ROAD: (Surface.WORN_PAVEMENT, WeightSplit.ROAD, 28.0),
    BikePreset.GRAVEL: (Surface.GRAVEL_CAT_2, WeightSplit.GRAVEL, 40.0),
    BikePreset.MTB: (Surface.GRAVEL_CAT_3, WeightSplit.MOUNTAIN, 55.0),
}
