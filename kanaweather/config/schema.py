"""Settings read from the process environment."""

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

import httpx

from kanaweather.errors import ConfigError

# Environment variable names
ENV_API_KEY = "WEATHER_API_KEY"
ENV_LOCATION = "WEATHER_API_LOCATION"
ENV_API_BASE = "WEATHER_API_BASE"
ENV_LANG = "WEATHER_API_LANG"
ENV_TIMEOUT = "WEATHER_API_TIMEOUT"
ENV_LOG_LEVEL = "WEATHER_LOG_LEVEL"

DEFAULT_API_BASE = "https://api.weatherapi.com/v1"
DEFAULT_LANG = "ja"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class WeatherConfig:
    """Settings for one invocation."""

    api_key: str
    location: str
    api_base: str = DEFAULT_API_BASE
    lang: str = DEFAULT_LANG
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "WeatherConfig":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from; defaults to ``os.environ``.
            **overrides: Field values that win over the environment.
                ``None`` values are ignored so unset CLI flags fall through.

        Raises:
            ConfigError: If the API key or location is missing, or the
                timeout is not a positive number.
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get(ENV_TIMEOUT, "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigError(f"{ENV_TIMEOUT} must be a number, got {raw_timeout!r}") from e

        config = cls(
            api_key=env.get(ENV_API_KEY, "").strip(),
            location=env.get(ENV_LOCATION, "").strip(),
            api_base=env.get(ENV_API_BASE, "").strip() or DEFAULT_API_BASE,
            lang=env.get(ENV_LANG, "").strip() or DEFAULT_LANG,
            timeout=timeout,
            log_level=env.get(ENV_LOG_LEVEL, "").strip().upper() or DEFAULT_LOG_LEVEL,
        )
        config = replace(config, **{
            k: v.strip() if isinstance(v, str) else v
            for k, v in overrides.items()
            if v is not None
        })
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigError if a required setting is unusable."""
        if not self.api_key.strip():
            raise ConfigError(f"{ENV_API_KEY} is not set")
        if not self.location.strip():
            raise ConfigError(f"{ENV_LOCATION} is not set")
        if self.timeout <= 0:
            raise ConfigError(f"{ENV_TIMEOUT} must be positive, got {self.timeout}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"{ENV_LOG_LEVEL} must be one of {', '.join(LOG_LEVELS)}")
        try:
            url = httpx.URL(self.api_base)
        except httpx.InvalidURL as e:
            raise ConfigError(f"{ENV_API_BASE} is not a valid URL: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigError(f"{ENV_API_BASE} must be an http(s) URL, got {self.api_base!r}")
