"""Open-Meteo client for temperature, elevation and hourly wind."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Sequence

import httpx

from tirerec import config
from tirerec.conditions.exceptions import (
    ConditionsAPIError,
    ConditionsConnectionError,
    ConditionsDataError,
    ConditionsTimeoutError,
)
from tirerec.models.enums import WindUnit
from tirerec.models.inputs import AmbientConditions, Coordinates, WindObservation

logger = logging.getLogger(__name__)


def _as_aware(when: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when


def parse_hourly_times(times: Sequence[str], utc_offset_seconds: int = 0) -> list[datetime]:
    """Parse Open-Meteo local hourly timestamps into aware datetimes."""
    try:
        tz = timezone(timedelta(seconds=utc_offset_seconds))
        return [datetime.fromisoformat(t).replace(tzinfo=tz) for t in times]
    except (TypeError, ValueError) as exc:
        raise ConditionsDataError(f"Malformed hourly timestamps: {exc}") from exc


def nearest_hourly_index(times: Sequence[datetime], when: datetime) -> int:
    """Index of the sample closest to `when`; the earliest wins a tie."""
    if not times:
        raise ConditionsDataError("No hourly samples to choose from")
    target = _as_aware(when)
    best_idx = 0
    best_delta = None
    for i, t in enumerate(times):
        delta = abs(_as_aware(t) - target)
        if best_delta is None or delta < best_delta:
            best_delta = delta
            best_idx = i
    return best_idx


def _hourly_block(data: dict[str, Any]) -> dict[str, Any]:
    hourly = data.get("hourly")
    if hourly is None:
        return {}
    if not isinstance(hourly, dict):
        raise ConditionsDataError("Malformed hourly data")
    return hourly


def _series(hourly: dict[str, Any], key: str) -> list[Any]:
    values = hourly.get(key)
    return values if isinstance(values, list) else []


def _number_or_nan(values: Sequence[Any], idx: int) -> float:
    if idx >= len(values) or not isinstance(values[idx], (int, float)):
        return math.nan
    return float(values[idx])


class OpenMeteoClient:
    """
    Synchronous Open-Meteo client using httpx.Client.

    Implements the ConditionsProvider interface. No API key is needed.
    """

    def __init__(
        self,
        forecast_url: str = config.FORECAST_URL,
        elevation_url: str = config.ELEVATION_URL,
        timeout: float = config.HTTP_TIMEOUT,
    ) -> None:
        self.forecast_url = forecast_url
        self.elevation_url = elevation_url
        self._client = httpx.Client(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> OpenMeteoClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, url: str, params: dict[str, Any]) -> dict[str, Any]:
        """Perform a GET request and return parsed JSON."""
        logger.debug("GET %s %s", url, params)
        try:
            response = self._client.get(url, params=params)
        except httpx.ConnectError as exc:
            raise ConditionsConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise ConditionsTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise ConditionsConnectionError(str(exc)) from exc
        if response.status_code >= 400:
            raise ConditionsAPIError(status_code=response.status_code, message=response.text)
        try:
            data = response.json()
        except ValueError as exc:
            raise ConditionsDataError(f"Response from {url} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise ConditionsDataError(f"Unexpected response from {url}")
        return data

    def _forecast(self, coords: Coordinates, hourly: str, **extra: Any) -> dict[str, Any]:
        params = {
            "latitude": coords.lat,
            "longitude": coords.lon,
            "hourly": hourly,
            "past_days": config.FORECAST_PAST_DAYS,
            "forecast_days": config.FORECAST_DAYS,
            "timezone": "auto",
            **extra,
        }
        return self._get(self.forecast_url, params)

    def fetch_temperature_c(self, coords: Coordinates, when: datetime) -> float:
        """Hourly 2 m temperature (°C) nearest to `when`."""
        data = self._forecast(coords, "temperature_2m")
        hourly = _hourly_block(data)
        times = _series(hourly, "time")
        temps = _series(hourly, "temperature_2m")
        if not times or not temps:
            raise ConditionsDataError("No temperature data returned")

        idx = nearest_hourly_index(
            parse_hourly_times(times, data.get("utc_offset_seconds", 0)), when
        )
        temp = _number_or_nan(temps, idx)
        logger.debug("Temperature at %s: %s °C (sample %s)", coords, temp, times[idx])
        return temp

    def fetch_elevation_m(self, coords: Coordinates) -> float:
        """Terrain elevation in meters."""
        data = self._get(self.elevation_url, {"latitude": coords.lat, "longitude": coords.lon})
        elevations = data.get("elevation")
        if not isinstance(elevations, list):
            elevations = [elevations] if elevations is not None else []
        if not elevations or not isinstance(elevations[0], (int, float)):
            raise ConditionsDataError("No elevation returned")
        return float(elevations[0])

    def fetch_wind(self, coords: Coordinates, when: datetime, unit: WindUnit = WindUnit.MPH) -> WindObservation:
        """Hourly 10 m wind speed, direction and gust nearest to `when`."""
        unit = WindUnit(unit)
        data = self._forecast(
            coords,
            "windspeed_10m,winddirection_10m,windgusts_10m",
            wind_speed_unit=unit.value,
        )
        hourly = _hourly_block(data)
        times = _series(hourly, "time")
        if not times:
            raise ConditionsDataError("No wind data returned")

        parsed = parse_hourly_times(times, data.get("utc_offset_seconds", 0))
        idx = nearest_hourly_index(parsed, when)
        gust = _number_or_nan(_series(hourly, "windgusts_10m"), idx)
        return WindObservation(
            direction_deg=_number_or_nan(_series(hourly, "winddirection_10m"), idx),
            speed=_number_or_nan(_series(hourly, "windspeed_10m"), idx),
            gust=gust if math.isfinite(gust) else None,
            unit=unit,
            time=parsed[idx],
        )

    def get_conditions(self, coords: Coordinates, when: datetime) -> AmbientConditions:
        """Temperature and elevation for compensation."""
        return AmbientConditions(
            ambient_temp_c=self.fetch_temperature_c(coords, when),
            elevation_m=self.fetch_elevation_m(coords),
            coords=coords,
            time=when,
        )

    def get_wind(self, coords: Coordinates, when: datetime, unit: WindUnit = WindUnit.MPH) -> WindObservation:
        return self.fetch_wind(coords, when, unit)
