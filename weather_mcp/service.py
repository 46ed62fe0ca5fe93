from typing import Any
from datetime import date
import logging
import math

from .config import WeatherConfig
from .http_client import fetch_json
from .models import AlertFeature, Coordinates, ForecastPeriod, PointsResult, SunriseSunsetResult
from .result import FailureReason, Result
from .sun import estimate_sunrise_sunset

logger = logging.getLogger(__name__)


def _parse_coordinate(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class WeatherService:
    """Geocoding and National Weather Service lookups for the tool handlers."""

    def __init__(self, config: WeatherConfig):
        self.config = config

    async def geocode(self, location: str) -> Result[Coordinates]:
        """Resolve free-text `location` to the first Nominatim match."""
        url = f"{self.config.geocoding_base}/search"
        params = {"q": location, "format": "json", "limit": 1}
        result = await fetch_json(url, self.config.geocoding_headers, params=params, timeout=self.config.timeout)
        if not result.ok:
            return result

        matches = result.value
        if not isinstance(matches, list):
            return Result.failure(FailureReason.PARSE_ERROR, "geocoder did not return a list")
        if not matches:
            return Result.failure(FailureReason.NOT_FOUND, f"no match for {location!r}")

        first = matches[0] if isinstance(matches[0], dict) else {}
        lat = _parse_coordinate(first.get("lat"))
        lon = _parse_coordinate(first.get("lon"))
        if lat is None or lon is None:
            logger.warning(f"[Geocoding] invalid coordinates for {location!r}: {first.get('lat')!r}, {first.get('lon')!r}")
            return Result.failure(FailureReason.PARSE_ERROR, "invalid coordinates in geocoder response")

        display_name = first.get("display_name")
        logger.info(f"[Geocoding] {location!r} -> {display_name or 'unnamed match'} ({lat}, {lon})")
        return Result.success(Coordinates(lat, lon, display_name if isinstance(display_name, str) else None))

    async def get_points(self, latitude: float, longitude: float) -> Result[PointsResult]:
        url = f"{self.config.nws_api_base}/points/{latitude:.4f},{longitude:.4f}"
        result = await fetch_json(url, self.config.nws_headers, timeout=self.config.timeout)
        if not result.ok:
            return result
        return Result.success(PointsResult.from_response(result.value))

    async def get_forecast_url(self, latitude: float, longitude: float) -> Result[str]:
        """Look up the grid-point forecast URL covering a coordinate pair.

        A points response without `properties.forecast` is reported as
        NOT_FOUND, meaning the location lies outside the NWS grid.
        """
        points = await self.get_points(latitude, longitude)
        if not points.ok:
            return points
        if not points.value.forecast_url:
            return Result.failure(FailureReason.NOT_FOUND, "no forecast URL for this grid point")
        return Result.success(points.value.forecast_url)

    async def get_forecast(self, forecast_url: str) -> Result[list[ForecastPeriod]]:
        result = await fetch_json(forecast_url, self.config.nws_headers, timeout=self.config.timeout)
        if not result.ok:
            return result
        props = result.value.get("properties") if isinstance(result.value, dict) else None
        periods = props.get("periods") if isinstance(props, dict) else None
        if not isinstance(periods, list):
            periods = []
        return Result.success([ForecastPeriod.from_dict(p) for p in periods])

    async def get_alerts(self, state: str) -> Result[list[AlertFeature]]:
        """Fetch active alerts for a two-letter state code (case-insensitive)."""
        state_code = state.upper()
        url = f"{self.config.nws_api_base}/alerts"
        result = await fetch_json(url, self.config.nws_headers, params={"area": state_code}, timeout=self.config.timeout)
        if not result.ok:
            return result
        features = result.value.get("features") if isinstance(result.value, dict) else None
        if not isinstance(features, list):
            features = []
        return Result.success([AlertFeature.from_feature(f) for f in features])

    def get_sunrise_sunset(self, latitude: float, longitude: float, today: date | None = None) -> SunriseSunsetResult:
        return estimate_sunrise_sunset(latitude, longitude, today=today)
