"""Weather data providers."""

from kanaweather.providers.weatherapi import CURRENT_PATH, fetch_current

__all__ = ["CURRENT_PATH", "fetch_current"]
