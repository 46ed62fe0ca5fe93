"""Shared test fixtures."""

import pytest

from weather_mcp.config import WeatherConfig
from weather_mcp.service import WeatherService

NWS = "https://nws.test"
GEO = "https://geo.test"


@pytest.fixture
def config() -> WeatherConfig:
    return WeatherConfig(nws_api_base=NWS, geocoding_base=GEO, user_agent="weather-mcp/1.0", timeout=5.0)


@pytest.fixture
def service(config: WeatherConfig) -> WeatherService:
    return WeatherService(config)


@pytest.fixture
def denver_geocode() -> list[dict]:
    return [{"lat": "39.7392358", "lon": "-104.990251", "display_name": "Denver, Colorado, United States"}]


@pytest.fixture
def denver_points() -> dict:
    return {
        "properties": {
            "forecast": f"{NWS}/gridpoints/BOU/63,62/forecast",
            "observation": f"{NWS}/gridpoints/BOU/63,62/stations",
        }
    }


@pytest.fixture
def denver_forecast() -> dict:
    return {
        "properties": {
            "periods": [
                {
                    "name": "Tonight",
                    "temperature": 41,
                    "temperatureUnit": "F",
                    "windSpeed": "5 to 10 mph",
                    "windDirection": "SW",
                    "shortForecast": "Mostly Clear",
                },
                {
                    "name": "Tuesday",
                    "temperature": 68,
                    "temperatureUnit": "F",
                    "windSpeed": "10 mph",
                    "windDirection": "W",
                    "shortForecast": "Sunny",
                },
            ]
        }
    }


@pytest.fixture
def ca_alerts() -> dict:
    return {
        "features": [
            {
                "properties": {
                    "event": "Heat Advisory",
                    "areaDesc": "Sacramento Valley",
                    "severity": "Moderate",
                    "status": "Actual",
                    "headline": "Heat Advisory issued for Sacramento Valley",
                }
            },
            {"properties": {"event": "Wind Advisory"}},
        ]
    }
