"""Tests for weather service."""
import json
import pytest
from weather_service import WeatherService
from weather_provider import (
    NoWeatherDataError,
    WeatherFetchError,
    WeatherParseError,
    WeatherProviderBase,
    WeatherProviderError,
)
from weather_data import CurrentCondition, WttrReport
from icons import WEATHER_ICONS


class MockProvider(WeatherProviderBase):
    """Mock weather provider for testing."""

    def __init__(self, return_data=None, raise_error=None):
        self.return_data = return_data
        self.raise_error = raise_error
        self.call_count = 0

    def get_current(self):
        self.call_count += 1
        if self.raise_error:
            raise self.raise_error
        return self.return_data


@pytest.fixture
def sample_report():
    """Sample wttr.in report."""
    return WttrReport(current_condition=[
        CurrentCondition(
            temp_c="21",
            feels_like_c="20",
            weather_desc=["Sunny"],
            weather_code="113",
            humidity="40",
            windspeed_kmph="11",
            winddir_16point="NNE",
            precip_mm="0.0",
        )
    ])


def test_weather_service_success(sample_report):
    """Test a live record is built from the provider's report."""
    provider = MockProvider(return_data=sample_report)
    service = WeatherService(provider, "Batna, Algeria")

    output = service.get_output()

    assert provider.call_count == 1
    assert output.text == WEATHER_ICONS["Sunny"] + " 21°C"
    assert output.alt == "Sunny"
    assert output.class_ == "clear"


def test_weather_service_no_retry():
    """Test that a failure is not retried."""
    provider = MockProvider(raise_error=WeatherFetchError("Network error: timed out"))
    service = WeatherService(provider, "Batna, Algeria")

    service.get_output()

    assert provider.call_count == 1


def test_weather_service_no_cache(sample_report):
    """Test that every call hits the provider."""
    provider = MockProvider(return_data=sample_report)
    service = WeatherService(provider, "Batna, Algeria")

    service.get_output()
    service.get_output()

    assert provider.call_count == 2


@pytest.mark.parametrize("error", [
    WeatherFetchError("Network error: read timed out"),
    WeatherParseError("Failed to parse response: Expecting value"),
    NoWeatherDataError(),
])
def test_weather_service_error_record(error):
    """Test that every failure becomes the same sentinel record."""
    service = WeatherService(MockProvider(raise_error=error), "Batna, Algeria")

    output = service.get_output()

    assert output.to_dict() == {
        "text": "⚠ N/A",
        "tooltip": str(error),
        "alt": "error",
        "class": "error",
    }
    assert json.loads(output.to_json())["class"] == "error"


def test_weather_service_empty_report():
    """Test that an empty report is treated like a provider failure."""
    service = WeatherService(MockProvider(return_data=WttrReport()), "Batna, Algeria")

    with pytest.raises(NoWeatherDataError):
        service.fetch_output()

    output = service.get_output()
    assert output.class_ == "error"
    assert output.tooltip == "no weather data"


def test_weather_service_fetch_output_raises():
    """Test that fetch_output propagates provider errors."""
    service = WeatherService(MockProvider(raise_error=WeatherFetchError("boom")), "X")

    with pytest.raises(WeatherProviderError):
        service.fetch_output()


def test_weather_service_empty_error_message():
    """Test that the tooltip is never empty."""
    service = WeatherService(MockProvider(raise_error=WeatherFetchError()), "X")

    assert service.get_output().tooltip == "WeatherFetchError"
