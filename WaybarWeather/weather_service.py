"""Weather service: one fetch, one format, one record."""
import logging
from weather_provider import WeatherProviderBase, WeatherProviderError
from weather_data import WaybarOutput, error_output
from widget_format import build_output


class WeatherService:
    """
    Service that turns a provider's report into a Waybar record.

    Performs exactly one provider call per request. There is no cache and
    no retry: the widget's own interval is the refresh policy.
    """

    def __init__(self, provider: WeatherProviderBase, location_name: str):
        """
        Initialize weather service.

        Args:
            provider: Weather provider to use
            location_name: Place name shown in the tooltip
        """
        self.provider = provider
        self.location_name = location_name

    def fetch_output(self) -> WaybarOutput:
        """
        Fetch and format the current weather.

        Returns:
            WaybarOutput: Record built from live data

        Raises:
            WeatherProviderError: If fetching or parsing fails
        """
        logging.info("Fetching weather data from provider...")
        report = self.provider.get_current()
        output = build_output(report, self.location_name)
        logging.info(f"Weather record ready: text={output.text!r} class={output.class_}")
        return output

    def get_output(self) -> WaybarOutput:
        """
        Like fetch_output(), but any provider failure becomes the error record.

        Returns:
            WaybarOutput: Live record, or error_output() with the failure message
        """
        try:
            return self.fetch_output()
        except WeatherProviderError as e:
            logging.error(f"Weather fetch failed: {e}")
            return error_output(str(e) or e.__class__.__name__)
