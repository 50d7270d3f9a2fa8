"""Command-line entry point: fetch, translate and print one status-bar record."""

import argparse
import sys

from loguru import logger
from rich.console import Console
from rich.markup import escape

from kanaweather import __logo__, __version__
from kanaweather.config.schema import DEFAULT_LOG_LEVEL, WeatherConfig
from kanaweather.errors import ConfigError, KanaWeatherError, NetworkError, ParseError
from kanaweather.providers.weatherapi import fetch_current
from kanaweather.weather.output import OutputRecord, build_output, error_output, render
from kanaweather.weather.reading import decode_reading
from kanaweather.weather.translations import translate

# Diagnostics go to stderr; stdout carries only the JSON record
console = Console(stderr=True)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Route loguru output to stderr at *level*."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def report(config: WeatherConfig) -> OutputRecord:
    """
    Run the fetch, decode, translate and format stages.

    Raises:
        NetworkError: If the API cannot be reached or answers with an error.
        ParseError: If the response cannot be decoded.
    """
    body = fetch_current(config)
    reading = decode_reading(body)
    entry = translate(reading.condition_code, reading.condition_text)
    if entry.missing:
        logger.warning(
            f"No reading for condition {reading.condition_code} ({reading.condition_text})"
        )
    return build_output(reading, entry)


def _describe(error: KanaWeatherError) -> str:
    if isinstance(error, ConfigError):
        return f"Error in configuration: {error}"
    if isinstance(error, NetworkError):
        return f"Error making request: {error}"
    if isinstance(error, ParseError):
        return f"Error parsing response: {error}"
    return f"Error: {error}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kanaweather",
        description="Print current weather as a status-bar JSON record.",
    )
    parser.add_argument("--location", help="location query (overrides WEATHER_API_LOCATION)")
    parser.add_argument("--lang", help="condition language hint (overrides WEATHER_API_LANG)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="exit with status 1 when the error record is printed",
    )
    parser.add_argument(
        "--version", action="version", version=f"{__logo__} kanaweather v{__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        config = WeatherConfig.from_env(location=args.location, lang=args.lang)
        configure_logging(config.log_level)
        record = report(config)
    except KanaWeatherError as e:
        message = _describe(e)
        logger.debug(message)
        console.print(f"[red]{escape(message)}[/red]")
        print(render(error_output(message)))
        return 1 if args.strict else 0

    print(render(record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
