"""Abstract interface every workout log source implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from load_engine.models.workout_log import WorkoutLogSample


class LogSource(ABC):
    """Supplies workout logs to the load engine.

    Implementations merge logs attached to scheduled workouts with
    personal (unscheduled) logs. Both kinds are returned as
    WorkoutLogSample dated by their workout day.
    """

    @abstractmethod
    def fetch_logs(
        self, athlete_ids: Sequence[str], start: date, end: date
    ) -> list[WorkoutLogSample]:
        """Return every log with a distance for *athlete_ids* dated in [start, end].

        Raises:
            DataUnavailableError: if the underlying store cannot be reached.
        """
        ...
