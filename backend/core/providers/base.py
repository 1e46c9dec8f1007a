from __future__ import annotations

from dataclasses import dataclass


class ForecastError(RuntimeError):
    """Base error for the forecast flow.

    ``status_code`` is the HTTP status the API layer responds with.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class UpstreamError(ForecastError):
    """Transport failure (500) or a non-2xx status reported by the upstream API."""


class DecodeError(ForecastError):
    """Raised when an upstream payload cannot be decoded."""


class ForecastNotFound(ForecastError):
    """Raised when the upstream has no usable forecast for the coordinates."""

    status_code = 404


@dataclass
class RequestConfig:
    timeout: float = 10.0


__all__ = [
    "ForecastError",
    "UpstreamError",
    "DecodeError",
    "ForecastNotFound",
    "RequestConfig",
]
