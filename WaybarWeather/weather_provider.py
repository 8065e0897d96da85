"""Weather provider abstraction and the errors a provider may raise."""
from abc import ABC, abstractmethod
from weather_data import WttrReport


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self) -> WttrReport:
        """
        Fetch current weather data.

        Returns:
            WttrReport: Current conditions (at least one entry)

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class WeatherFetchError(WeatherProviderError):
    """Transport failure: timeout, DNS, refused connection, bad status, unreadable body."""
    pass


class WeatherParseError(WeatherProviderError):
    """The response body is not the JSON we expect."""
    pass


class NoWeatherDataError(WeatherProviderError):
    """Well-formed response without any current condition."""

    def __init__(self, message: str = "no weather data"):
        super().__init__(message)
