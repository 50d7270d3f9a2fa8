"""Configuration module for kanaweather."""

from kanaweather.config.schema import WeatherConfig

__all__ = ["WeatherConfig"]
