"""Shared test fixtures: anchor dates, workout log samples, daily load series."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Sequence

import pytest

from load_engine.models.daily_load import DailyLoadSeries
from load_engine.models.enums import DistanceUnit
from load_engine.models.workout_log import WorkoutLogSample
from log_source.base import LogSource

ANCHOR = date(2026, 3, 31)


class FakeLogSource(LogSource):
    """In-memory log source that records every fetch it serves."""

    def __init__(self, samples: Sequence[WorkoutLogSample] = (), error: Exception | None = None) -> None:
        self.samples = list(samples)
        self.error = error
        self.calls: list[tuple[list[str], date, date]] = []

    def fetch_logs(self, athlete_ids, start, end):
        self.calls.append((list(athlete_ids), start, end))
        if self.error is not None:
            raise self.error
        return [
            s for s in self.samples
            if s.athlete_id in athlete_ids and start <= s.date <= end
        ]


@pytest.fixture
def anchor() -> date:
    """Fixed "today" for every engine call in the tests."""
    return ANCHOR


@pytest.fixture
def make_sample() -> Callable[..., WorkoutLogSample]:
    """Factory for samples dated by days before the anchor.

    Usage:
        s = make_sample(days_ago=3, distance=5.0, effort=8)
    """

    def factory(
        days_ago: int = 0,
        distance: float | None = 5.0,
        unit: DistanceUnit | str | None = DistanceUnit.MILE,
        effort: int | None = 5,
        athlete_id: str = "athlete-1",
    ) -> WorkoutLogSample:
        return WorkoutLogSample(
            athlete_id=athlete_id,
            date=ANCHOR - timedelta(days=days_ago),
            distance_value=distance,
            distance_unit=unit,
            effort_level=effort,
        )

    return factory


@pytest.fixture
def make_series() -> Callable[[Sequence[float]], DailyLoadSeries]:
    """Factory turning a list of loads (oldest first) into a series ending on the anchor."""

    def factory(loads: Sequence[float]) -> DailyLoadSeries:
        return DailyLoadSeries(anchor_date=ANCHOR, loads=tuple(float(x) for x in loads))

    return factory


@pytest.fixture
def fake_log_source() -> Callable[..., FakeLogSource]:
    """Factory for an in-memory LogSource."""
    return FakeLogSource


@pytest.fixture
def safe_daily_loads() -> tuple[float, ...]:
    """35 days of stable training → ACWR ~1.0."""
    return tuple([50.0] * 35)


@pytest.fixture
def spiked_daily_loads() -> tuple[float, ...]:
    """28 days low + 7 days high → ACWR in the danger band."""
    return tuple([30.0] * 28 + [90.0] * 7)


@pytest.fixture
def critical_daily_loads() -> tuple[float, ...]:
    """28 days very low + 7 days very high → ACWR > 2.0."""
    return tuple([10.0] * 28 + [100.0] * 7)


@pytest.fixture
def caution_daily_loads() -> tuple[float, ...]:
    """28 days at 40 + 7 days at 70 → ACWR ~1.35."""
    return tuple([40.0] * 28 + [70.0] * 7)


@pytest.fixture
def undertrained_daily_loads() -> tuple[float, ...]:
    """28 days moderate + 7 days very low → ACWR < 0.8."""
    return tuple([60.0] * 28 + [15.0] * 7)
