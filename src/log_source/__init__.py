"""Workout log source: all data-store network I/O lives here."""

from log_source.base import LogSource
from log_source.client import SupabaseLogSource
from log_source.exceptions import (
    DataUnavailableError,
    LogSourceAuthError,
    LogSourceError,
    LogSourceRateLimitError,
)
from log_source.mapper import map_personal_log, map_scheduled_log

__all__ = [
    "DataUnavailableError",
    "LogSource",
    "LogSourceAuthError",
    "LogSourceError",
    "LogSourceRateLimitError",
    "SupabaseLogSource",
    "map_personal_log",
    "map_scheduled_log",
]
