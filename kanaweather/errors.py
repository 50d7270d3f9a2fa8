"""Error types raised along the weather pipeline."""


class KanaWeatherError(Exception):
    """Base error for kanaweather failures."""


class ConfigError(KanaWeatherError):
    """Required settings are missing or invalid."""


class NetworkError(KanaWeatherError):
    """The weather API could not be reached or gave no usable response."""


class ResponseError(NetworkError):
    """The weather API answered with an HTTP error status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class ParseError(KanaWeatherError):
    """The response body is not JSON or lacks the expected fields."""


class SerializationError(KanaWeatherError):
    """The output record could not be encoded as JSON."""
