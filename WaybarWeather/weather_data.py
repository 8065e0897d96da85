"""Weather domain model - wttr.in payload subset and the Waybar output record."""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

ERROR_TEXT = "⚠ N/A"
ERROR_CLASS = "error"


def _text(value: Any) -> str:
    """JSON null becomes "", everything else its string form."""
    return "" if value is None else str(value)


def _first_value(entries: Any) -> str:
    """Return the first ``{"value": ...}`` entry of a wttr.in list, or ""."""
    if not entries:
        return ""
    return _text(entries[0].get("value"))


@dataclass
class CurrentCondition:
    """One entry of wttr.in's ``current_condition`` list."""
    temp_c: str = ""
    feels_like_c: str = ""
    weather_desc: List[str] = field(default_factory=list)  # e.g. ["Partly cloudy"]
    weather_code: str = ""  # e.g. "116"
    humidity: str = ""
    windspeed_kmph: str = ""
    winddir_16point: str = ""  # e.g. "NNE"
    precip_mm: str = ""

    @property
    def condition(self) -> str:
        return self.weather_desc[0] if self.weather_desc else ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "CurrentCondition":
        return cls(
            temp_c=_text(data.get("temp_C")),
            feels_like_c=_text(data.get("FeelsLikeC")),
            weather_desc=[_text(d.get("value")) for d in data.get("weatherDesc") or []],
            weather_code=_text(data.get("weatherCode")),
            humidity=_text(data.get("humidity")),
            windspeed_kmph=_text(data.get("windspeedKmph")),
            winddir_16point=_text(data.get("winddir16Point")),
            precip_mm=_text(data.get("precipMM")),
        )


@dataclass
class NearestArea:
    """One entry of wttr.in's ``nearest_area`` list."""
    area_name: str = ""
    country: str = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "NearestArea":
        return cls(
            area_name=_first_value(data.get("areaName")),
            country=_first_value(data.get("country")),
        )


@dataclass
class WttrReport:
    """The subset of a wttr.in ``format=j1`` response this program consumes."""
    current_condition: List[CurrentCondition] = field(default_factory=list)
    nearest_area: List[NearestArea] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "WttrReport":
        """
        Build a report from a decoded wttr.in response.

        Args:
            data: Decoded JSON object

        Returns:
            WttrReport: Parsed report (lists may be empty)

        Raises:
            TypeError, AttributeError: If the payload has the wrong shape
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return cls(
            current_condition=[CurrentCondition.from_json(c) for c in data.get("current_condition") or []],
            nearest_area=[NearestArea.from_json(a) for a in data.get("nearest_area") or []],
        )


@dataclass
class WaybarOutput:
    """The JSON record Waybar reads from a custom module's stdout."""
    text: str
    tooltip: str
    alt: str
    class_: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "text": self.text,
            "tooltip": self.tooltip,
            "alt": self.alt,
            "class": self.class_,
        }

    def to_json(self) -> str:
        """Serialize to a single JSON line; glyphs are written as-is."""
        return json.dumps(self.to_dict(), ensure_ascii=False)


def error_output(message: str) -> WaybarOutput:
    """Sentinel record shown whenever fetching or parsing fails."""
    return WaybarOutput(text=ERROR_TEXT, tooltip=message, alt=ERROR_CLASS, class_=ERROR_CLASS)
