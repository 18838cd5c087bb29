"""Data models for the training-load engine."""

from load_engine.models.acwr_result import (
    ACWRHistoryPoint,
    ACWRReport,
    ACWRResult,
    RosterEntry,
)
from load_engine.models.daily_load import DailyLoad, DailyLoadSeries
from load_engine.models.enums import DistanceUnit, TrendDirection, Zone
from load_engine.models.workout_log import WorkoutLogSample

__all__ = [
    "ACWRHistoryPoint",
    "ACWRReport",
    "ACWRResult",
    "DailyLoad",
    "DailyLoadSeries",
    "DistanceUnit",
    "RosterEntry",
    "TrendDirection",
    "WorkoutLogSample",
    "Zone",
]
