"""Decoding of the current-conditions response body."""

import json
from dataclasses import dataclass
from typing import Any

from loguru import logger

from kanaweather.errors import ParseError


def _reject_constant(token: str) -> Any:
    """Refuse the non-standard NaN and Infinity tokens json accepts by default."""
    raise ParseError(f"Invalid JSON in response: non-standard token {token}")


@dataclass(frozen=True)
class WeatherReading:
    """Current conditions at the configured location.

    Attributes:
        temperature_c: Air temperature in degrees Celsius.
        condition_text: Provider's condition label in the requested language.
        condition_code: Provider's numeric condition identifier.
    """

    temperature_c: float
    condition_text: str
    condition_code: int


def _field(data: Any, *path: str) -> Any:
    """Walk nested objects along *path*, raising ParseError on a gap."""
    value = data
    for i, key in enumerate(path):
        if not isinstance(value, dict) or key not in value:
            raise ParseError(f"Missing field: {'.'.join(path[: i + 1])}")
        value = value[key]
    return value


def decode_reading(body: bytes | str) -> WeatherReading:
    """
    Parse a current-conditions response into a WeatherReading.

    Args:
        body: Raw response body.

    Returns:
        The decoded reading.

    Raises:
        ParseError: If the body is not JSON or a field is absent or mistyped.
    """
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON in response: {e}") from e

    temperature = _field(data, "current", "temp_c")
    text = _field(data, "current", "condition", "text")
    code = _field(data, "current", "condition", "code")

    # bool is an int subclass; reject it explicitly
    if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
        raise ParseError(f"current.temp_c must be a number, got {temperature!r}")
    if not isinstance(text, str):
        raise ParseError(f"current.condition.text must be a string, got {text!r}")
    if isinstance(code, bool) or not isinstance(code, int):
        raise ParseError(f"current.condition.code must be an integer, got {code!r}")

    reading = WeatherReading(
        temperature_c=float(temperature),
        condition_text=text,
        condition_code=code,
    )
    logger.debug(f"Decoded reading: {reading}")
    return reading
