"""Condition text / condition code to Nerd Font weather glyph lookup."""
from types import MappingProxyType
from typing import Mapping

# Keyed by condition text with spaces and hyphens removed
WEATHER_ICONS: Mapping[str, str] = MappingProxyType({
    "Clear": "󰖙",
    "Sunny": "󰖙",
    "PartlyCloudy": "󰖕",
    "Cloudy": "󰖐",
    "Overcast": "󰖐",
    "Mist": "󰖑",
    "Fog": "󰖑",
    "LightRain": "󰖗",
    "HeavyRain": "󰖖",
    "Rain": "󰖗",
    "LightSnow": "󰖘",
    "HeavySnow": "󰖘",
    "Snow": "󰖘",
    "Thunderstorm": "󰖓",
    "ThunderyShowers": "󰖓",
    "ThunderySnow": "󰖓",
    "Drizzle": "󰖗",
    "LightShowers": "󰖗",
    "HeavyShowers": "󰖖",
    "Sleet": "󰖘",
    "ClearNight": "󰖔",
    "PartlyCloudyNight": "󰼱",
})

# Keyed by wttr.in weatherCode; more stable than the free-text description
WEATHER_CODE_ICONS: Mapping[str, str] = MappingProxyType({
    "113": "󰖙",
    "116": "󰖕",
    "119": "󰖐",
    "122": "󰖐",
    "143": "󰖑",
    "176": "󰖗",
    "179": "󰖘",
    "182": "󰖘",
    "185": "󰖘",
    "200": "󰖓",
    "227": "󰖘",
    "230": "󰖘",
    "248": "󰖑",
    "260": "󰖑",
    "263": "󰖗",
    "266": "󰖗",
    "281": "󰖘",
    "284": "󰖘",
    "293": "󰖗",
    "296": "󰖗",
    "299": "󰖗",
    "302": "󰖗",
    "305": "󰖖",
    "308": "󰖖",
    "311": "󰖘",
    "314": "󰖘",
    "317": "󰖘",
    "320": "󰖘",
    "323": "󰖘",
    "326": "󰖘",
    "329": "󰖘",
    "332": "󰖘",
    "335": "󰖘",
    "338": "󰖘",
    "350": "󰖘",
    "353": "󰖗",
    "356": "󰖖",
    "359": "󰖖",
    "362": "󰖘",
    "365": "󰖘",
    "368": "󰖘",
    "371": "󰖘",
    "374": "󰖘",
    "377": "󰖘",
    "386": "󰖓",
    "389": "󰖓",
    "392": "󰖓",
    "395": "󰖓",
})

DEFAULT_ICON = "󰖐"  # overcast


def normalize_condition(condition: str) -> str:
    return condition.replace(" ", "").replace("-", "")


def get_icon(condition: str, code: str) -> str:
    """
    Resolve the display glyph for a condition.

    The text table is tried first, then the code table, then DEFAULT_ICON.

    Args:
        condition: Free-text description, e.g. "Partly cloudy"
        code: wttr.in weather code, e.g. "116"

    Returns:
        str: Glyph; never empty
    """
    icon = WEATHER_ICONS.get(normalize_condition(condition or ""))
    if icon is not None:
        return icon
    return WEATHER_CODE_ICONS.get(code or "", DEFAULT_ICON)
