"""Tests for the Open-Meteo conditions client."""

import math
from datetime import datetime, timedelta, timezone

import httpx
import pytest
import respx

from tirerec import config
from tirerec.conditions.base import StaticConditionsProvider
from tirerec.conditions.exceptions import (
    ConditionsAPIError,
    ConditionsConnectionError,
    ConditionsDataError,
    ConditionsError,
    ConditionsTimeoutError,
)
from tirerec.conditions.open_meteo import (
    OpenMeteoClient,
    nearest_hourly_index,
    parse_hourly_times,
)
from tirerec.models.enums import WindUnit
from tirerec.models.inputs import AmbientConditions, Coordinates
from tirerec.recommender import recommend_ride

COORDS = Coordinates(lat=39.77, lon=-86.16)
WHEN = datetime(2024, 5, 1, 11, 20, tzinfo=timezone.utc)

HOURS = ["2024-05-01T10:00", "2024-05-01T11:00", "2024-05-01T12:00"]

TEMPERATURE_PAYLOAD = {
    "utc_offset_seconds": 0,
    "hourly": {"time": HOURS, "temperature_2m": [10.0, 12.5, 14.0]},
}

WIND_PAYLOAD = {
    "utc_offset_seconds": 0,
    "hourly": {
        "time": HOURS,
        "windspeed_10m": [8.0, 11.0, 15.0],
        "winddirection_10m": [250.0, 265.0, 280.0],
        "windgusts_10m": [14.0, 19.0, 25.0],
    },
}


@pytest.fixture
def client():
    with respx.mock:
        with OpenMeteoClient() as c:
            yield c


class TestHourlyHelpers:
    """Tests for timestamp parsing and nearest-sample selection."""

    def test_parse_applies_offset(self):
        parsed = parse_hourly_times(["2024-05-01T12:00"], 7200)
        assert parsed[0] == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

    def test_nearest_index(self):
        times = parse_hourly_times(HOURS)
        assert nearest_hourly_index(times, WHEN) == 1
        assert nearest_hourly_index(times, WHEN + timedelta(hours=5)) == 2
        assert nearest_hourly_index(times, WHEN - timedelta(days=1)) == 0

    def test_tie_picks_earliest(self):
        times = parse_hourly_times(HOURS)
        halfway = datetime(2024, 5, 1, 10, 30, tzinfo=timezone.utc)
        assert nearest_hourly_index(times, halfway) == 0

    def test_naive_when_is_utc(self):
        times = parse_hourly_times(HOURS)
        assert nearest_hourly_index(times, datetime(2024, 5, 1, 11, 50)) == 2

    def test_empty_samples(self):
        with pytest.raises(ConditionsDataError):
            nearest_hourly_index([], WHEN)


class TestOpenMeteoClient:
    """Tests for OpenMeteoClient."""

    def test_fetch_temperature(self, client):
        route = respx.get(config.FORECAST_URL).mock(
            return_value=httpx.Response(200, json=TEMPERATURE_PAYLOAD)
        )
        assert client.fetch_temperature_c(COORDS, WHEN) == 12.5

        params = route.calls.last.request.url.params
        assert params["hourly"] == "temperature_2m"
        assert params["timezone"] == "auto"
        assert float(params["latitude"]) == pytest.approx(39.77)

    def test_fetch_temperature_local_offset(self, client):
        """Local timestamps are shifted by the reported UTC offset."""
        payload = dict(TEMPERATURE_PAYLOAD, utc_offset_seconds=7200)
        respx.get(config.FORECAST_URL).mock(return_value=httpx.Response(200, json=payload))
        # Samples are 08:00Z, 09:00Z, 10:00Z
        when = datetime(2024, 5, 1, 10, 10, tzinfo=timezone.utc)
        assert client.fetch_temperature_c(COORDS, when) == 14.0

    def test_fetch_temperature_null_sample(self, client):
        payload = {"hourly": {"time": HOURS, "temperature_2m": [10.0, None, 14.0]}}
        respx.get(config.FORECAST_URL).mock(return_value=httpx.Response(200, json=payload))
        assert math.isnan(client.fetch_temperature_c(COORDS, WHEN))

    def test_fetch_temperature_empty(self, client):
        respx.get(config.FORECAST_URL).mock(return_value=httpx.Response(200, json={"hourly": {}}))
        with pytest.raises(ConditionsDataError, match="No temperature data returned"):
            client.fetch_temperature_c(COORDS, WHEN)

    def test_fetch_elevation(self, client):
        respx.get(config.ELEVATION_URL).mock(
            return_value=httpx.Response(200, json={"elevation": [218.0]})
        )
        assert client.fetch_elevation_m(COORDS) == 218.0

    def test_fetch_elevation_missing(self, client):
        respx.get(config.ELEVATION_URL).mock(return_value=httpx.Response(200, json={"elevation": []}))
        with pytest.raises(ConditionsDataError, match="No elevation returned"):
            client.fetch_elevation_m(COORDS)

    def test_fetch_wind(self, client):
        route = respx.get(config.FORECAST_URL).mock(
            return_value=httpx.Response(200, json=WIND_PAYLOAD)
        )
        observation = client.fetch_wind(COORDS, WHEN, WindUnit.KMH)
        assert observation.direction_deg == 265.0
        assert observation.speed == 11.0
        assert observation.gust == 19.0
        assert observation.unit is WindUnit.KMH
        assert observation.time == datetime(2024, 5, 1, 11, 0, tzinfo=timezone.utc)
        assert route.calls.last.request.url.params["wind_speed_unit"] == "kmh"

    def test_fetch_wind_missing_values(self, client):
        """Null samples give an observation without data rather than an error."""
        payload = {
            "hourly": {
                "time": HOURS,
                "windspeed_10m": [None, None, None],
                "winddirection_10m": [250.0, 265.0, 280.0],
            }
        }
        respx.get(config.FORECAST_URL).mock(return_value=httpx.Response(200, json=payload))
        observation = client.fetch_wind(COORDS, WHEN)
        assert not observation.has_data
        assert observation.gust is None

    def test_get_conditions(self, client):
        respx.get(config.FORECAST_URL).mock(
            return_value=httpx.Response(200, json=TEMPERATURE_PAYLOAD)
        )
        respx.get(config.ELEVATION_URL).mock(
            return_value=httpx.Response(200, json={"elevation": [218.0]})
        )
        conditions = client.get_conditions(COORDS, WHEN)
        assert conditions.ambient_temp_c == 12.5
        assert conditions.elevation_m == 218.0
        assert conditions.coords == COORDS
        assert conditions.time == WHEN

    def test_api_error(self, client):
        respx.get(config.ELEVATION_URL).mock(return_value=httpx.Response(500, text="boom"))
        with pytest.raises(ConditionsAPIError) as exc_info:
            client.fetch_elevation_m(COORDS)
        assert exc_info.value.status_code == 500

    def test_connection_error(self, client):
        respx.get(config.ELEVATION_URL).mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(ConditionsConnectionError):
            client.fetch_elevation_m(COORDS)

    def test_timeout(self, client):
        respx.get(config.FORECAST_URL).mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(ConditionsTimeoutError):
            client.fetch_wind(COORDS, WHEN)

    def test_exception_hierarchy(self):
        for exc in (
            ConditionsAPIError,
            ConditionsConnectionError,
            ConditionsDataError,
            ConditionsTimeoutError,
        ):
            assert issubclass(exc, ConditionsError)


class TestStaticConditionsProvider:
    """Tests for StaticConditionsProvider."""

    def test_returns_configured_values(self, cool_sea_level, west_wind):
        provider = StaticConditionsProvider(conditions=cool_sea_level, wind=west_wind)
        assert provider.get_conditions(COORDS, WHEN) == cool_sea_level
        assert provider.get_wind(COORDS, WHEN, WindUnit.MPH) == west_wind

    def test_missing_values_raise(self):
        provider = StaticConditionsProvider(conditions=AmbientConditions(ambient_temp_c=1, elevation_m=2))
        with pytest.raises(ConditionsDataError):
            provider.get_wind(COORDS, WHEN, WindUnit.MPH)


class TestMalformedResponses:
    """Broken transports and payloads surface as ConditionsError subclasses."""

    def test_non_json_body(self, client):
        respx.get(config.FORECAST_URL).mock(
            return_value=httpx.Response(200, text="<html>gateway error</html>")
        )
        with pytest.raises(ConditionsDataError, match="not valid JSON"):
            client.fetch_temperature_c(COORDS, WHEN)

    def test_json_that_is_not_an_object(self, client):
        respx.get(config.ELEVATION_URL).mock(return_value=httpx.Response(200, json=[218.0]))
        with pytest.raises(ConditionsDataError, match="Unexpected response"):
            client.fetch_elevation_m(COORDS)

    def test_read_error(self, client):
        """Transport failures other than connect/timeout map to a connection error."""
        respx.get(config.FORECAST_URL).mock(side_effect=httpx.ReadError("connection reset"))
        with pytest.raises(ConditionsConnectionError):
            client.fetch_wind(COORDS, WHEN)

    def test_unparseable_time(self, client):
        payload = {"hourly": {"time": ["yesterday"], "temperature_2m": [10.0]}}
        respx.get(config.FORECAST_URL).mock(return_value=httpx.Response(200, json=payload))
        with pytest.raises(ConditionsDataError, match="Malformed hourly timestamps"):
            client.fetch_temperature_c(COORDS, WHEN)

    def test_hourly_block_not_an_object(self, client):
        respx.get(config.FORECAST_URL).mock(
            return_value=httpx.Response(200, json={"hourly": [1, 2, 3]})
        )
        with pytest.raises(ConditionsDataError, match="Malformed hourly data"):
            client.fetch_wind(COORDS, WHEN)

    def test_null_utc_offset(self, client):
        payload = dict(TEMPERATURE_PAYLOAD, utc_offset_seconds=None)
        respx.get(config.FORECAST_URL).mock(return_value=httpx.Response(200, json=payload))
        with pytest.raises(ConditionsDataError):
            client.fetch_temperature_c(COORDS, WHEN)

    def test_scalar_elevation(self, client):
        respx.get(config.ELEVATION_URL).mock(
            return_value=httpx.Response(200, json={"elevation": 218.0})
        )
        assert client.fetch_elevation_m(COORDS) == 218.0

    def test_non_numeric_elevation(self, client):
        respx.get(config.ELEVATION_URL).mock(
            return_value=httpx.Response(200, json={"elevation": ["high"]})
        )
        with pytest.raises(ConditionsDataError, match="No elevation returned"):
            client.fetch_elevation_m(COORDS)


class TestRideWithUnreliableWeather:
    """recommend_ride keeps the baseline when the live weather service misbehaves."""

    def _assert_baseline_only(self, result):
        assert result.pressures.front.psi == 62
        assert result.pressures.rear.psi == 67
        assert result.compensation.available is False
        assert result.compensation.reason
        assert result.headings.available is False

    def test_non_json_forecast(self, client, road_inputs):
        respx.get(config.FORECAST_URL).mock(return_value=httpx.Response(200, text="not json"))
        self._assert_baseline_only(recommend_ride(road_inputs, client, COORDS, WHEN))

    def test_forecast_read_error(self, client, road_inputs):
        respx.get(config.FORECAST_URL).mock(side_effect=httpx.ReadError("connection reset"))
        self._assert_baseline_only(recommend_ride(road_inputs, client, COORDS, WHEN))

    def test_unparseable_forecast_time(self, client, road_inputs):
        payload = {"hourly": {"time": ["yesterday"], "temperature_2m": [10.0]}}
        respx.get(config.FORECAST_URL).mock(return_value=httpx.Response(200, json=payload))
        self._assert_baseline_only(recommend_ride(road_inputs, client, COORDS, WHEN))
