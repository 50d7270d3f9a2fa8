"""Weather reading, translation and output formatting."""

from kanaweather.weather.output import OutputRecord, build_output, error_output, render
from kanaweather.weather.reading import WeatherReading, decode_reading
from kanaweather.weather.translations import TranslationEntry, translate

__all__ = [
    "OutputRecord",
    "TranslationEntry",
    "WeatherReading",
    "build_output",
    "decode_reading",
    "error_output",
    "render",
    "translate",
]
