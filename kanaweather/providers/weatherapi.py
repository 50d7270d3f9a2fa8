"""WeatherAPI.com current-conditions fetcher."""

import httpx
from loguru import logger

from kanaweather.config.schema import WeatherConfig
from kanaweather.errors import NetworkError, ResponseError

# Endpoint path relative to the configured API base
CURRENT_PATH = "/current.json"


def current_url(config: WeatherConfig) -> str:
    """Return the current-conditions endpoint URL for *config*."""
    return config.api_base.rstrip("/") + CURRENT_PATH


def _error_message(response: httpx.Response) -> str:
    """
    Extract a readable message from an error response.

    WeatherAPI.com reports failures as ``{"error": {"code": ..., "message": ...}}``;
    anything else falls back to the HTTP reason phrase.
    """
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        message = None
    if isinstance(message, str) and message:
        return message
    return response.reason_phrase or f"HTTP {response.status_code}"


def fetch_current(config: WeatherConfig) -> bytes:
    """
    Fetch current conditions for the configured location.

    Args:
        config: Settings carrying the API key, location and language hint.

    Returns:
        Raw response body.

    Raises:
        NetworkError: If the request cannot be completed.
        ResponseError: If the API answers with an error status.
    """
    url = current_url(config)
    params = {"q": config.location, "key": config.api_key, "lang": config.lang}

    logger.debug(f"GET {url} q={config.location} lang={config.lang}")
    with httpx.Client(timeout=config.timeout) as client:
        try:
            response = client.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Failed to reach weather API: {e}") from e

        logger.debug(f"Weather API responded {response.status_code}")
        if response.status_code >= 400:
            raise ResponseError(response.status_code, _error_message(response))

        body = response.content
        if not body:
            raise NetworkError("Weather API returned an empty response")
        return body
