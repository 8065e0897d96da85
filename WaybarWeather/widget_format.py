"""Formatting logic for the Waybar record - pure functions for testability."""
import time
from typing import Optional, Sequence, Tuple

from icons import get_icon
from weather_data import CurrentCondition, WaybarOutput, WttrReport
from weather_provider import NoWeatherDataError

# Evaluated in order, first match wins ("light rain with thunder" is "rain")
CATEGORY_RULES: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("rain",), "rain"),
    (("snow",), "snow"),
    (("clear", "sunny"), "clear"),
    (("cloud",), "cloud"),
    (("thunder",), "thunder"),
    (("fog", "mist"), "fog"),
)
DEFAULT_CATEGORY = "normal"

TOOLTIP_TEMPLATE = (
    "{location}\n"
    "{condition}\n"
    "Temperature: {temp}°C\n"
    "Feels like: {feels}°C\n"
    "Humidity: {humidity}%\n"
    "Wind: {wind_speed} km/h {wind_dir}\n"
    "Precipitation: {precip} mm\n"
    "Updated: {updated}"
)


def classify_condition(condition: str) -> str:
    """
    Map a condition description to a CSS class for the widget.

    Args:
        condition: Free-text description, e.g. "Patchy light rain"

    Returns:
        One of rain, snow, clear, cloud, thunder, fog or normal
    """
    lowered = (condition or "").lower()
    for keywords, label in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return label
    return DEFAULT_CATEGORY


def format_text(icon: str, temp_c: str) -> str:
    return f"{icon} {temp_c}°C"


def format_tooltip(location_name: str, current: CurrentCondition, now: Optional[float] = None) -> str:
    """Multi-line tooltip; the Updated line is local time at formatting, not API time."""
    updated = time.strftime("%H:%M:%S", time.localtime(now if now is not None else time.time()))
    return TOOLTIP_TEMPLATE.format(
        location=location_name,
        condition=current.condition,
        temp=current.temp_c,
        feels=current.feels_like_c,
        humidity=current.humidity,
        wind_speed=current.windspeed_kmph,
        wind_dir=current.winddir_16point,
        precip=current.precip_mm,
        updated=updated,
    )


def build_output(report: WttrReport, location_name: str, now: Optional[float] = None) -> WaybarOutput:
    """
    Compose the Waybar record from the first current condition.

    Args:
        report: Parsed wttr.in report
        location_name: Human readable place shown on the tooltip's first line
        now: UNIX time for the Updated line (defaults to now)

    Returns:
        WaybarOutput: text, tooltip, alt and class fields

    Raises:
        NoWeatherDataError: If the report has no current condition
    """
    if not report.current_condition:
        raise NoWeatherDataError()

    current = report.current_condition[0]
    condition = current.condition
    icon = get_icon(condition, current.weather_code)

    return WaybarOutput(
        text=format_text(icon, current.temp_c),
        tooltip=format_tooltip(location_name, current, now),
        alt=condition,
        class_=classify_condition(condition),
    )
