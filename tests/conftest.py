"""Shared fixtures for kanaweather tests."""

import json
import sys
from typing import Any
from unittest.mock import MagicMock

import pytest
from loguru import logger

from kanaweather.config.schema import WeatherConfig


def make_body(temp_c: Any = 5.0, text: Any = "晴れ", code: Any = 1000) -> bytes:
    """Build a current-conditions response body."""
    return json.dumps(
        {
            "location": {"name": "Tokyo", "country": "Japan"},
            "current": {
                "temp_c": temp_c,
                "is_day": 1,
                "condition": {"text": text, "icon": "//cdn/113.png", "code": code},
            },
        },
        ensure_ascii=False,
    ).encode("utf-8")


def create_mock_response(
    status_code: int = 200,
    content: bytes = b"",
    json_data: Any = None,
    reason_phrase: str = "OK",
) -> MagicMock:
    """Create a configured mock httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.reason_phrase = reason_phrase
    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON")
    return response


@pytest.fixture
def config() -> WeatherConfig:
    return WeatherConfig(api_key="test-key", location="Tokyo")


@pytest.fixture
def weather_env(monkeypatch):
    """Provide a valid environment for CLI runs."""
    monkeypatch.setenv("WEATHER_API_KEY", "test-key")
    monkeypatch.setenv("WEATHER_API_LOCATION", "Tokyo")
    for name in ("WEATHER_API_BASE", "WEATHER_API_LANG", "WEATHER_API_TIMEOUT", "WEATHER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default loguru sink after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
