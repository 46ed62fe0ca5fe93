"""Value records parsed from NWS and Nominatim JSON payloads.

Parsers accept whatever the upstream sent and leave absent fields as None;
rendering defaults live in `weather_mcp.formatters`.
"""

from dataclasses import dataclass, field
from typing import Any


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _properties(payload: Any) -> dict:
    if isinstance(payload, dict) and isinstance(payload.get("properties"), dict):
        return payload["properties"]
    return {}


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float
    display_name: str | None = None


@dataclass(frozen=True)
class AlertFeature:
    event: str | None = None
    area_desc: str | None = None
    severity: str | None = None
    status: str | None = None
    headline: str | None = None

    @classmethod
    def from_feature(cls, feature: Any) -> "AlertFeature":
        props = _properties(feature)
        return cls(
            event=_str_or_none(props.get("event")),
            area_desc=_str_or_none(props.get("areaDesc")),
            severity=_str_or_none(props.get("severity")),
            status=_str_or_none(props.get("status")),
            headline=_str_or_none(props.get("headline")),
        )


@dataclass(frozen=True)
class ForecastPeriod:
    name: str | None = None
    temperature: float | int | None = None
    temperature_unit: str | None = None
    wind_speed: str | None = None
    wind_direction: str | None = None
    short_forecast: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ForecastPeriod":
        if not isinstance(data, dict):
            return cls()
        temperature = data.get("temperature")
        # bool is an int subclass; NWS never sends one as a temperature.
        if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
            temperature = None
        return cls(
            name=_str_or_none(data.get("name")),
            temperature=temperature,
            temperature_unit=_str_or_none(data.get("temperatureUnit")),
            wind_speed=_str_or_none(data.get("windSpeed")),
            wind_direction=_str_or_none(data.get("windDirection")),
            short_forecast=_str_or_none(data.get("shortForecast")),
        )


@dataclass(frozen=True)
class PointsResult:
    forecast_url: str | None = None
    observation_url: str | None = None

    @classmethod
    def from_response(cls, payload: Any) -> "PointsResult":
        props = _properties(payload)
        return cls(
            forecast_url=_str_or_none(props.get("forecast")) or None,
            observation_url=_str_or_none(props.get("observation")) or None,
        )


@dataclass(frozen=True)
class SunriseSunsetResult:
    sunrise: list[str] = field(default_factory=list)
    sunset: list[str] = field(default_factory=list)
    civil_twilight_begin: list[str] = field(default_factory=list)
    civil_twilight_end: list[str] = field(default_factory=list)
    nautical_twilight_begin: list[str] = field(default_factory=list)
    nautical_twilight_end: list[str] = field(default_factory=list)
    astronomical_twilight_begin: list[str] = field(default_factory=list)
    astronomical_twilight_end: list[str] = field(default_factory=list)
