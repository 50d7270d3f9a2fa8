"""Status-bar output record and its JSON encoding."""

import json
from dataclasses import dataclass
from typing import Any

from loguru import logger

from kanaweather.errors import SerializationError
from kanaweather.weather.reading import WeatherReading
from kanaweather.weather.translations import TranslationEntry

CLASS_PREFIX = "class-"
ERROR_TEXT = "Error"
ERROR_CLASS = "error"


@dataclass(frozen=True)
class OutputRecord:
    """One status-bar update.

    Attributes:
        text: Label shown in the bar.
        alt: Condition code, used by the host for format selection.
        class_name: CSS class; serialized as ``class``.
        tooltip: Hover text, omitted from the JSON when None.
    """

    text: str
    alt: int
    class_name: str
    tooltip: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for wire format."""
        result: dict[str, Any] = {
            "text": self.text,
            "alt": self.alt,
            "class": self.class_name,
        }
        if self.tooltip is not None:
            result["tooltip"] = self.tooltip
        return result


def build_output(reading: WeatherReading, entry: TranslationEntry) -> OutputRecord:
    """Assemble the record for a reading and its translation."""
    return OutputRecord(
        text=f"{reading.temperature_c:.1f}°C ({reading.condition_text})",
        alt=reading.condition_code,
        class_name=f"{CLASS_PREFIX}{reading.condition_code}",
        tooltip=entry.tooltip(),
    )


def error_output(message: str | None = None) -> OutputRecord:
    """Return the fixed error record, optionally carrying *message* as tooltip."""
    return OutputRecord(text=ERROR_TEXT, alt=0, class_name=ERROR_CLASS, tooltip=message)


def encode(record: OutputRecord) -> str:
    """
    Serialize *record* to a single JSON line.

    Raises:
        SerializationError: If the record holds values JSON cannot represent.
    """
    try:
        return json.dumps(record.to_dict(), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode output: {e}") from e


def render(record: OutputRecord) -> str:
    """Serialize *record*, substituting the error record if encoding fails."""
    try:
        return encode(record)
    except SerializationError as e:
        logger.error(str(e))
        return encode(error_output())
