"""Exceptions raised by the ride-conditions collaborators."""

from __future__ import annotations


class ConditionsError(Exception):
    """Base exception for all conditions lookup errors."""


class ConditionsConnectionError(ConditionsError):
    """Raised when the weather service cannot be reached."""


class ConditionsTimeoutError(ConditionsError):
    """Raised when a request to the weather service times out."""


class ConditionsAPIError(ConditionsError):
    """Raised when the weather service returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ConditionsDataError(ConditionsError):
    """Raised when the service response has no usable data."""
