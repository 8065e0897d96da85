"""Waybar custom module: current wttr.in weather as one JSON line on stdout."""
import logging
import math
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from weather_service import WeatherService
from wttr_provider import WttrProvider

DEFAULT_LOCATION = "Batna,Algeria"
DEFAULT_LOCATION_NAME = "Batna, Algeria"
DEFAULT_TIMEOUT = 10.0
LANG = "en"


@dataclass
class Config:
    location: str = DEFAULT_LOCATION
    location_name: str = DEFAULT_LOCATION_NAME
    base_url: str = WttrProvider.BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    # stdout belongs to Waybar, so logs go to stderr
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stderr)]
    log_file_error = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file))
        except OSError as exc:
            log_file_error = exc
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )
    if log_file_error is not None:
        logging.warning("Cannot open log file %s (%s), logging to stderr only", log_file, log_file_error)


def env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_config() -> Config:
    location = os.getenv("WTTR_LOCATION", DEFAULT_LOCATION)
    location_name = os.getenv("WTTR_LOCATION_NAME", DEFAULT_LOCATION_NAME)
    base_url = os.getenv("WTTR_BASE_URL", WttrProvider.BASE_URL)
    timeout_raw = os.getenv("WTTR_TIMEOUT")

    timeout = DEFAULT_TIMEOUT
    if timeout_raw:
        try:
            timeout = float(timeout_raw)
        except ValueError:
            logging.warning("Invalid WTTR_TIMEOUT %r, using %ss", timeout_raw, DEFAULT_TIMEOUT)
        else:
            if not math.isfinite(timeout) or timeout <= 0:
                logging.warning("Out of range WTTR_TIMEOUT %r, using %ss", timeout_raw, DEFAULT_TIMEOUT)
                timeout = DEFAULT_TIMEOUT

    logging.info("Configuration loaded: location=%s timeout=%ss", location, timeout)
    return Config(location=location, location_name=location_name, base_url=base_url, timeout=timeout)


def build_weather_service(config: Config) -> WeatherService:
    provider = WttrProvider(
        location=config.location,
        base_url=config.base_url,
        lang=LANG,
        timeout=config.timeout,
    )
    return WeatherService(provider=provider, location_name=config.location_name)


def main() -> None:
    load_dotenv()
    setup_logging(os.getenv("WTTR_LOG_FILE"), env_flag("WTTR_VERBOSE"))
    config = load_config()

    output = build_weather_service(config).get_output()
    try:
        line = output.to_json()
    except (TypeError, ValueError) as exc:
        logging.error("Failed to encode output: %s", exc)
        return

    print(line, flush=True)


if __name__ == "__main__":
    main()
