"""Workout log sample: one logged training event from the log source."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from load_engine.models.enums import DistanceUnit


@dataclass(frozen=True)
class WorkoutLogSample:
    """A single logged run, already resolved to its workout date.

    Scheduled-workout logs carry the scheduled date, personal logs carry
    their own workout date; the engine treats both the same. Frozen so
    no stage of the pipeline can alter a sample it was handed.
    """

    athlete_id: str
    date: date
    distance_value: float | None = None
    distance_unit: DistanceUnit | str | None = DistanceUnit.MILE
    effort_level: int | None = None
