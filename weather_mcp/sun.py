"""Approximate sunrise/sunset estimator.

This is a placeholder model, not an ephemeris: it shifts a fixed 06:30/18:30
baseline linearly with latitude and ignores longitude, day of year and the
twilight depression angles. Civil, nautical and astronomical boundaries are
all reported equal to sunrise/sunset.
"""

from datetime import date, datetime, time, timedelta

from .models import SunriseSunsetResult

BASE_SUNRISE_HOURS = 6.5
BASE_SUNSET_HOURS = 18.5


def sunrise_hours(latitude: float) -> float:
    return BASE_SUNRISE_HOURS + (latitude / 15) * 0.5


def sunset_hours(latitude: float) -> float:
    return BASE_SUNSET_HOURS - (latitude / 15) * 0.5


def _at_hours(day: date, hours: float) -> str:
    moment = datetime.combine(day, time()) + timedelta(minutes=round(hours * 60))
    return moment.isoformat(timespec="seconds")


def estimate_sunrise_sunset(
    latitude: float, longitude: float = 0.0, today: date | None = None
) -> SunriseSunsetResult:
    """Estimate today's sunrise and sunset as local ISO-8601 timestamps.

    `longitude` is accepted for call-site symmetry but does not affect the result.
    """
    day = today or date.today()
    sunrise = _at_hours(day, sunrise_hours(latitude))
    sunset = _at_hours(day, sunset_hours(latitude))
    return SunriseSunsetResult(
        sunrise=[sunrise],
        sunset=[sunset],
        civil_twilight_begin=[sunrise],
        civil_twilight_end=[sunset],
        nautical_twilight_begin=[sunrise],
        nautical_twilight_end=[sunset],
        astronomical_twilight_begin=[sunrise],
        astronomical_twilight_end=[sunset],
    )
