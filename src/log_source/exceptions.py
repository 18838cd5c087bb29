"""Custom exception hierarchy for the workout log source."""

from __future__ import annotations


class LogSourceError(Exception):
    """Base exception for all log_source errors."""


class DataUnavailableError(LogSourceError):
    """Workout logs could not be fetched (network failure or error response)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LogSourceAuthError(DataUnavailableError):
    """The data store rejected the API key (HTTP 401 / 403)."""


class LogSourceRateLimitError(DataUnavailableError):
    """HTTP 429: too many requests, retries exhausted."""

    def __init__(self, message: str = "Rate limited by the log source") -> None:
        super().__init__(message, status_code=429)
