"""wttr.in JSON API provider implementation."""
import logging
from urllib.parse import quote

import requests

from weather_provider import (
    NoWeatherDataError,
    WeatherFetchError,
    WeatherParseError,
    WeatherProviderBase,
)
from weather_data import WttrReport


class WttrProvider(WeatherProviderBase):
    """
    Weather provider using wttr.in's JSON output.

    Uses the ``format=j1`` endpoint: https://wttr.in/:help
    No API key is required. One GET per call, no retries.
    """

    BASE_URL = "https://wttr.in"

    def __init__(
        self,
        location: str,
        base_url: str = BASE_URL,
        lang: str = "en",
        timeout: float = 10
    ):
        """
        Initialize wttr.in provider.

        Args:
            location: Location query, e.g. "Batna,Algeria"
            base_url: Service root without trailing slash
            lang: Language code for condition descriptions
            timeout: HTTP request timeout in seconds
        """
        self.location = location
        self.base_url = base_url.rstrip("/")
        self.lang = lang
        self.timeout = timeout

    def build_url(self) -> str:
        return f"{self.base_url}/{quote(self.location)}?format=j1&lang={self.lang}"

    def get_current(self) -> WttrReport:
        """
        Fetch current weather from wttr.in.

        Returns:
            WttrReport: Parsed report with at least one current condition

        Raises:
            WeatherFetchError: On timeout, connection failure or HTTP error status
            WeatherParseError: If the body is not the expected JSON
            NoWeatherDataError: If the response has no current condition
        """
        url = self.build_url()
        logging.info(f"Making wttr.in request: {url}")

        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during wttr.in request: {e}")
            raise WeatherFetchError(f"Network error: {e}") from e

        logging.info(f"API response status: {response.status_code}")
        if not response.ok:
            logging.error(f"wttr.in request failed with status {response.status_code}")
            raise WeatherFetchError(f"HTTP {response.status_code}: {response.text[:200]}")

        try:
            data = response.json()
            logging.debug(f"API response (truncated): {str(data)[:500]}...")
            report = WttrReport.from_json(data)
        except (ValueError, TypeError, AttributeError) as e:
            logging.error(f"Failed to parse wttr.in response: {e}", exc_info=True)
            raise WeatherParseError(f"Failed to parse response: {e}") from e

        if not report.current_condition:
            logging.error("Response has an empty 'current_condition' list")
            raise NoWeatherDataError()

        current = report.current_condition[0]
        logging.info(f"Successfully parsed weather data: {current.temp_c}°C, {current.condition}")
        return report
