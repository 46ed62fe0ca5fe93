from .models import AlertFeature, ForecastPeriod

SEPARATOR = "---"


def format_alert(feature: AlertFeature) -> str:
    """Format an alert feature into a readable string."""
    return "\n".join([
        f"Event: {feature.event or 'Unknown'}",
        f"Area: {feature.area_desc or 'Unknown'}",
        f"Severity: {feature.severity or 'Unknown'}",
        f"Status: {feature.status or 'Unknown'}",
        f"Headline: {feature.headline or 'No headline'}",
        SEPARATOR,
    ])


def format_forecast_period(period: ForecastPeriod) -> str:
    """Format a forecast period into a readable string."""
    temperature = period.temperature
    if temperature is None:
        temperature = "Unknown"
    elif isinstance(temperature, float) and temperature.is_integer():
        temperature = int(temperature)
    return "\n".join([
        f"{period.name or 'Unknown'}:",
        f"Temperature: {temperature}°{period.temperature_unit or 'F'}",
        f"Wind: {period.wind_speed or 'Unknown'} {period.wind_direction or ''}",
        period.short_forecast or "No forecast available",
        SEPARATOR,
    ])


def join_blocks(blocks: list[str]) -> str:
    return "\n".join(blocks)
