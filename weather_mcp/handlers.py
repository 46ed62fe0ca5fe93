"""Tool handlers: run one lookup chain and turn every outcome into display text."""

from datetime import date
import logging

from .formatters import format_alert, format_forecast_period, join_blocks
from .result import FailureReason, Result
from .service import WeatherService

logger = logging.getLogger(__name__)


def _location_failure_text(location: str, result: Result) -> str:
    if result.reason is FailureReason.NOT_FOUND:
        return (
            f"Could not find location: {location}. Please provide a more specific location "
            "(e.g., 'Los Angeles, CA' or 'San Francisco, California')."
        )
    if result.reason is FailureReason.PARSE_ERROR:
        return f"The geocoding service returned unusable data for {location}. Please try a different location."
    return f"Error geocoding location: {location}. Please try again later."


async def handle_get_alerts(service: WeatherService, state: str) -> str:
    state_code = state.upper()
    result = await service.get_alerts(state_code)
    if not result.ok:
        logger.info(f"[Alerts] lookup for {state_code} failed ({result})")
    if not result.ok or not result.value:
        return f"No weather alerts found for {state_code}."

    alerts = [format_alert(feature) for feature in result.value]
    return f"Active alerts for {state_code}:\n\n{join_blocks(alerts)}"


async def handle_get_forecast(service: WeatherService, location: str) -> str:
    coordinates = await service.geocode(location)
    if not coordinates.ok:
        return _location_failure_text(location, coordinates)
    lat, lon = coordinates.value.latitude, coordinates.value.longitude

    forecast_url = await service.get_forecast_url(lat, lon)
    if not forecast_url.ok:
        if forecast_url.reason is FailureReason.NOT_FOUND:
            return (
                f"No weather forecast found for {lat}, {lon}. "
                "This location is not covered by the NWS forecast grid."
            )
        return f"Failed to retrieve grid point data for {lat}, {lon} ({forecast_url.reason.value})."

    forecast = await service.get_forecast(forecast_url.value)
    if not forecast.ok:
        return "Failed to retrieve forecast data"
    if not forecast.value:
        return "No forecast periods available for this location."

    periods = [format_forecast_period(period) for period in forecast.value]
    return f"Forecast for {lat}, {lon}:\n\n{join_blocks(periods)}"


async def handle_get_sunrise_sunset(service: WeatherService, location: str, today: date | None = None) -> str:
    coordinates = await service.geocode(location)
    if not coordinates.ok:
        return _location_failure_text(location, coordinates)

    day = today or date.today()
    times = service.get_sunrise_sunset(coordinates.value.latitude, coordinates.value.longitude, today=day)
    prefix = day.isoformat()
    sunrise = next((t for t in times.sunrise if t.startswith(prefix)), "Not available")
    sunset = next((t for t in times.sunset if t.startswith(prefix)), "Not available")

    return (
        f"Sunrise and Sunset Times for {location}:\n\n"
        f"Today ({prefix}):\n"
        f"Sunrise: {sunrise}\n"
        f"Sunset: {sunset}\n\n"
        "Note: times are approximate estimates based on latitude only."
    )
