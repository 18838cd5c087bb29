"""Fold raw workout logs into a dense daily training-load series.

Session load = effort (RPE 1-10) x distance in miles.

Reference:
    Foster et al. (2001). A new approach to monitoring exercise training.
    J Strength Cond Res 15(1):109-115. (session-RPE load)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from load_engine.math.units import sanitize_distance, to_canonical_miles
from load_engine.models.daily_load import DailyLoadSeries
from load_engine.models.enums import (
    DEFAULT_EFFORT_LEVEL,
    LOAD_WINDOW_DAYS,
    MAX_EFFORT_LEVEL,
    MIN_EFFORT_LEVEL,
    WEEKLY_WINDOW_DAYS,
)
from load_engine.models.workout_log import WorkoutLogSample


@dataclass(frozen=True)
class SampleAggregate:
    """Outputs of a single pass over one athlete's samples."""

    series: DailyLoadSeries
    weekly_miles: float


def effective_effort(effort_level: int | None) -> int:
    """Effort used for the load product.

    Unlogged effort counts as moderate (5); out-of-range values are
    clamped into 1-10.
    """
    if effort_level is None:
        return DEFAULT_EFFORT_LEVEL
    return max(MIN_EFFORT_LEVEL, min(MAX_EFFORT_LEVEL, int(effort_level)))


def sample_miles(sample: WorkoutLogSample) -> float:
    """Canonical-mile distance of a sample after clamping."""
    return to_canonical_miles(sanitize_distance(sample.distance_value), sample.distance_unit)


def aggregate_samples(
    samples: Iterable[WorkoutLogSample],
    anchor_date: date,
    window_days: int = LOAD_WINDOW_DAYS,
    weekly_days: int = WEEKLY_WINDOW_DAYS,
) -> SampleAggregate:
    """Build the daily load series and the trailing weekly mileage in one pass.

    Args:
        samples: One athlete's logs. Samples with no distance, or dated
            outside ``[anchor_date - window_days + 1, anchor_date]``, are
            ignored.
        anchor_date: The last day of the window ("today").
        window_days: Length of the resulting series.
        weekly_days: Trailing sub-window (ending on the anchor) whose
            miles are summed.

    Returns:
        SampleAggregate with a series of exactly ``window_days`` entries.
    """
    window_start = anchor_date - timedelta(days=window_days - 1)
    week_start = anchor_date - timedelta(days=weekly_days - 1)

    daily: dict[date, float] = {}
    weekly_miles = 0.0
    for sample in samples:
        if sample.distance_value is None:
            continue
        if not window_start <= sample.date <= anchor_date:
            continue

        miles = sample_miles(sample)
        daily[sample.date] = daily.get(sample.date, 0.0) + effective_effort(sample.effort_level) * miles
        if sample.date >= week_start:
            weekly_miles += miles

    loads = tuple(
        daily.get(window_start + timedelta(days=i), 0.0) for i in range(window_days)
    )
    return SampleAggregate(
        series=DailyLoadSeries(anchor_date=anchor_date, loads=loads),
        weekly_miles=weekly_miles,
    )


def aggregate_daily_loads(
    samples: Iterable[WorkoutLogSample],
    anchor_date: date,
    window_days: int = LOAD_WINDOW_DAYS,
) -> DailyLoadSeries:
    """Daily load series over the trailing window ending on *anchor_date*."""
    return aggregate_samples(samples, anchor_date, window_days).series
