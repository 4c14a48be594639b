"""
Pytest configuration and shared fixtures.
"""

import pytest

from tirerec.models.enums import Speed, Surface, TireType, WeightSplit, WeightUnit
from tirerec.models.inputs import AmbientConditions, RiderInputs, WindObservation


@pytest.fixture
def road_inputs() -> RiderInputs:
    """Default road rider: 180 lbs, 28 mm, worn pavement, 48/52 split."""
    return RiderInputs(
        system_weight=180.0,
        weight_unit=WeightUnit.LBS,
        surface=Surface.WORN_PAVEMENT,
        tire_width_mm=28.0,
        tire_type=TireType.HIGH_PERFORMANCE,
        speed=Speed.MODERATE_GROUP,
        weight_split=WeightSplit.ROAD,
    )


@pytest.fixture
def gravel_inputs() -> RiderInputs:
    """Gravel rider entered in kilograms using the Gravel preset."""
    return RiderInputs(
        system_weight=85.0,
        weight_unit=WeightUnit.KG,
        preset="Gravel",
        tire_type=TireType.MID_RANGE_TUBELESS,
        speed=Speed.FAST_GROUP,
    )


@pytest.fixture
def cool_sea_level() -> AmbientConditions:
    """5 °C at sea level."""
    return AmbientConditions(ambient_temp_c=5.0, elevation_m=0.0)


@pytest.fixture
def west_wind() -> WindObservation:
    """12 mph wind from the west (blowing toward the east)."""
    return WindObservation(direction_deg=270.0, speed=12.0, gust=18.0)
