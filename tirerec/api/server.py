"""
FastAPI server for the tire pressure and wind recommender.

Provides JSON endpoints for baseline pressures, temperature/elevation
compensation and wind-aware heading suggestions.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from tirerec import __version__, config
from tirerec.conditions.exceptions import ConditionsError
from tirerec.conditions.open_meteo import OpenMeteoClient
from tirerec.models.enums import (
    BikePreset,
    Speed,
    Surface,
    TireType,
    WeightSplit,
    WheelDiameter,
    WindUnit,
)
from tirerec.models.inputs import (
    AmbientConditions,
    CompensationInput,
    Coordinates,
    HeadingOptions,
    RiderInputs,
    WheelLoadInput,
    WindObservation,
)
from tirerec.models.outputs import (
    CompensationResult,
    HeadingRecommendation,
    PressureRecommendation,
    RideRecommendation,
    WheelPressure,
    WindBreakdown,
)
from tirerec.physics.compensation import ABSOLUTE_ZERO_C, recommend_compensated
from tirerec.physics.pressure import (
    SPEED_MULT,
    SURFACE_MULT,
    TIRE_TYPE_OFFSET,
    compute_wheel_psi,
)
from tirerec.physics.units import round_half_up, to_bar
from tirerec.recommender import HeadingAdvisor, PressureRecommender, recommend_ride

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Tire Pressure & Wind Recommender API",
    description="""
    Bicycle tire pressure recommendations with temperature/elevation
    compensation, plus wind-aware riding headings.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class CompensateRequest(BaseModel):
    """Rider inputs plus either resolved conditions or a location to look up."""
    rider: RiderInputs = Field(default_factory=RiderInputs)
    conditions: Optional[AmbientConditions] = None
    coords: Optional[Coordinates] = None
    when: Optional[datetime] = None
    ref_temp_c: float = Field(default=config.DEFAULT_REF_TEMP_C, gt=ABSOLUTE_ZERO_C)
    keep_absolute_constant: bool = config.DEFAULT_KEEP_ABSOLUTE_CONSTANT


class HeadingsRequest(BaseModel):
    """A wind observation (or a location to look one up) and search options."""
    wind: Optional[WindObservation] = None
    coords: Optional[Coordinates] = None
    when: Optional[datetime] = None
    unit: WindUnit = WindUnit.MPH
    options: HeadingOptions = Field(default_factory=HeadingOptions)


class ComponentsRequest(BaseModel):
    """A wind observation and a fixed route heading."""
    wind: WindObservation
    route_heading_deg: float


class RideRequest(BaseModel):
    """Rider inputs and a location for a full ride recommendation."""
    rider: RiderInputs = Field(default_factory=RiderInputs)
    coords: Coordinates
    when: Optional[datetime] = None
    unit: WindUnit = WindUnit.MPH
    route_heading_deg: Optional[float] = None
    options: HeadingOptions = Field(default_factory=HeadingOptions)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@app.get("/", tags=["System"])
async def root():
    """Service banner."""
    return {"name": config.APP_NAME, "description": config.APP_DESCRIPTION, "docs": "/docs"}


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/example", response_model=RiderInputs, tags=["Reference"])
async def get_example():
    """Get an example rider input."""
    return RiderInputs(system_weight=180.0, preset=BikePreset.ROAD)


@app.get("/options", tags=["Reference"])
async def list_options():
    """Get the supported categories and their coefficients."""
    return {
        "surfaces": {s.value: SURFACE_MULT[s] for s in Surface},
        "speeds": {s.value: SPEED_MULT[s] for s in Speed},
        "tire_types": {t.value: TIRE_TYPE_OFFSET[t] for t in TireType},
        "wheel_diameters": [d.value for d in WheelDiameter],
        "weight_splits": {s.value: {"front": s.front, "rear": s.rear} for s in WeightSplit},
        "presets": {
            p.value: {
                "surface": p.surface.value,
                "weight_split": p.weight_split.value,
                "default_width_mm": p.default_width_mm,
            }
            for p in BikePreset
        },
        "wind_units": [u.value for u in WindUnit],
    }


@app.post("/pressure", response_model=PressureRecommendation, tags=["Recommendations"])
async def pressure(inputs: RiderInputs):
    """Recommend baseline front/rear pressures."""
    try:
        return PressureRecommender(inputs).baseline()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Pressure recommendation failed")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.post("/pressure/wheel", response_model=WheelPressure, tags=["Recommendations"])
async def wheel_pressure(wheel: WheelLoadInput):
    """Baseline pressure for a single wheel load."""
    try:
        psi = round_half_up(
            compute_wheel_psi(
                wheel.load_lbs,
                wheel.tire_width_mm,
                wheel.surface,
                wheel.speed,
                wheel.tire_type,
                wheel.wheel_diameter,
            )
        )
        return WheelPressure(load_lbs=wheel.load_lbs, psi=psi, bar=to_bar(psi))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/compensate/manual", response_model=CompensationResult, tags=["Recommendations"])
async def compensate_manual(request: CompensationInput):
    """Compensate explicit reference pressures (e.g. your own tuned targets)."""
    try:
        result = recommend_compensated(
            request.front_psi_ref,
            request.rear_psi_ref,
            request.ref_temp_c,
            request.ambient_temp_c,
            request.elevation_m,
            request.keep_absolute_constant,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CompensationResult(
        available=True,
        ambient_temp_c=result.ambient_temp_c,
        elevation_m=result.elevation_m,
        ambient_pressure_psi=result.ambient_pressure_psi,
        front_psi=result.front_psi,
        rear_psi=result.rear_psi,
        ref_temp_c=request.ref_temp_c,
        keep_absolute_constant=request.keep_absolute_constant,
        note=result.note,
    )


@app.post("/compensate", response_model=CompensationResult, tags=["Recommendations"])
def compensate(request: CompensateRequest):
    """
    Adjust baseline pressures for ambient temperature and elevation.

    Uses the given conditions, or looks them up for coords. A failed
    lookup or out-of-range conditions return available=false rather
    than an error.
    """
    if request.conditions is None and request.coords is None:
        raise HTTPException(status_code=400, detail="Provide conditions or coords")

    recommender = PressureRecommender(request.rider)
    try:
        if request.conditions is not None:
            return recommender.compensate(
                request.conditions, request.ref_temp_c, request.keep_absolute_constant
            )
        with OpenMeteoClient() as client:
            recommender.provider = client
            return recommender.compensate_at(
                request.coords,
                request.when or _now(),
                request.ref_temp_c,
                request.keep_absolute_constant,
            )
    except Exception as e:
        logger.exception("Compensation failed")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.post("/wind/headings", response_model=HeadingRecommendation, tags=["Wind"])
def wind_headings(request: HeadingsRequest):
    """Recommend riding headings for the wind."""
    if request.wind is None and request.coords is None:
        raise HTTPException(status_code=400, detail="Provide wind or coords")

    advisor = HeadingAdvisor(request.options)
    if request.wind is not None:
        return advisor.recommend(request.wind)

    try:
        with OpenMeteoClient() as client:
            observation = client.fetch_wind(request.coords, request.when or _now(), request.unit)
    except ConditionsError as e:
        logger.warning("Wind lookup failed for %s: %s", request.coords, e)
        observation = None
    return advisor.recommend(observation)


@app.post("/wind/components", response_model=Optional[WindBreakdown], tags=["Wind"])
async def wind_breakdown(request: ComponentsRequest):
    """Head/tail and crosswind for a fixed route heading (null without wind data)."""
    try:
        return HeadingAdvisor().breakdown(request.wind, request.route_heading_deg)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/ride", response_model=RideRecommendation, tags=["Recommendations"])
def ride(request: RideRequest):
    """
    Full ride recommendation using live weather at coords.

    Weather failures only make compensation or headings unavailable; the
    baseline pressures are always returned.
    """
    try:
        with OpenMeteoClient() as client:
            return recommend_ride(
                request.rider,
                client,
                request.coords,
                request.when or _now(),
                options=request.options,
                wind_unit=request.unit,
                route_heading_deg=request.route_heading_deg,
            )
    except Exception as e:
        logger.exception("Ride recommendation failed")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")
