from weather_mcp.formatters import format_alert, format_forecast_period, join_blocks
from weather_mcp.models import AlertFeature, ForecastPeriod


class TestFormatAlert:
    def test_all_fields(self):
        text = format_alert(AlertFeature(
            event="Flood Warning",
            area_desc="Harris County",
            severity="Severe",
            status="Actual",
            headline="Flood Warning until noon",
        ))
        assert text == (
            "Event: Flood Warning\n"
            "Area: Harris County\n"
            "Severity: Severe\n"
            "Status: Actual\n"
            "Headline: Flood Warning until noon\n"
            "---"
        )

    def test_missing_fields_use_defaults(self):
        lines = format_alert(AlertFeature()).split("\n")
        assert lines == [
            "Event: Unknown",
            "Area: Unknown",
            "Severity: Unknown",
            "Status: Unknown",
            "Headline: No headline",
            "---",
        ]

    def test_empty_strings_use_defaults(self):
        text = format_alert(AlertFeature(event="", headline=""))
        assert "Event: Unknown" in text
        assert "Headline: No headline" in text
        assert text.endswith("\n---")

    def test_from_feature_without_properties(self):
        assert AlertFeature.from_feature({}) == AlertFeature()
        assert AlertFeature.from_feature(None) == AlertFeature()


class TestFormatForecastPeriod:
    def test_all_fields(self):
        text = format_forecast_period(ForecastPeriod(
            name="Tonight",
            temperature=41,
            temperature_unit="F",
            wind_speed="5 mph",
            wind_direction="SW",
            short_forecast="Mostly Clear",
        ))
        assert text == "Tonight:\nTemperature: 41°F\nWind: 5 mph SW\nMostly Clear\n---"

    def test_missing_unit_defaults_to_f(self):
        text = format_forecast_period(ForecastPeriod(name="Today", temperature=20))
        assert "Temperature: 20°F" in text

    def test_missing_fields_use_defaults(self):
        assert format_forecast_period(ForecastPeriod()) == (
            "Unknown:\nTemperature: Unknown°F\nWind: Unknown \nNo forecast available\n---"
        )

    def test_zero_degrees_is_rendered(self):
        text = format_forecast_period(ForecastPeriod(temperature=0, temperature_unit="C"))
        assert "Temperature: 0°C" in text

    def test_whole_float_temperature_renders_as_integer(self):
        assert "Temperature: 72°F" in format_forecast_period(ForecastPeriod(temperature=72.0))
        assert "Temperature: 72.5°F" in format_forecast_period(ForecastPeriod(temperature=72.5))

    def test_from_dict_ignores_non_numeric_temperature(self):
        period = ForecastPeriod.from_dict({"name": "Tonight", "temperature": "warm", "temperatureUnit": "F"})
        assert period.temperature is None
        assert period.temperature_unit == "F"


def test_join_blocks_uses_single_newline():
    blocks = [format_alert(AlertFeature(event="A")), format_alert(AlertFeature(event="B"))]
    joined = join_blocks(blocks)
    assert "---\nEvent: B" in joined
    assert joined.count("---") == 2
