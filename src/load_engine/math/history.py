"""Historical ACWR replay and short-range load trend for charting."""

from __future__ import annotations

from load_engine.math.training_load import acwr_ratio, calculate_ewma
from load_engine.models.acwr_result import ACWRHistoryPoint
from load_engine.models.daily_load import DailyLoad, DailyLoadSeries
from load_engine.models.enums import (
    ACUTE_LAMBDA,
    CHRONIC_LAMBDA,
    EWMA_ACUTE_SPAN,
    EWMA_CHRONIC_SPAN,
    RAW_TREND_DAYS,
    TREND_LOOKBACK_POINTS,
    TREND_STABLE_TOLERANCE,
    TrendDirection,
)


def build_acwr_history(series: DailyLoadSeries) -> list[ACWRHistoryPoint]:
    """Replay the ACWR calculation for every day with a full chronic window.

    For day ``i`` (from index 27 onwards) the acute EWMA covers days
    ``i-6..i`` and the chronic EWMA covers ``i-27..i``. Days where the
    chronic EWMA is zero are skipped, so the result may be sparse.

    Args:
        series: Dense daily load series, oldest first.

    Returns:
        History points, oldest first, never with a None ratio.
    """
    loads = series.loads
    history: list[ACWRHistoryPoint] = []
    for i in range(EWMA_CHRONIC_SPAN - 1, len(loads)):
        acute = calculate_ewma(loads[max(0, i - EWMA_ACUTE_SPAN + 1): i + 1], ACUTE_LAMBDA)
        chronic = calculate_ewma(loads[max(0, i - EWMA_CHRONIC_SPAN + 1): i + 1], CHRONIC_LAMBDA)
        acwr = acwr_ratio(acute, chronic)
        if acwr is None:
            continue
        history.append(ACWRHistoryPoint(date=series.date_at(i), acwr=acwr))
    return history


def raw_load_trend(series: DailyLoadSeries, days: int = RAW_TREND_DAYS) -> list[DailyLoad]:
    """The last *days* entries of the series as (date, load) pairs."""
    return series.days()[-days:] if days > 0 else []


def trend_direction(history: list[ACWRHistoryPoint] | tuple[ACWRHistoryPoint, ...]) -> TrendDirection | None:
    """Direction of the ACWR over the last few history points.

    Returns None with fewer than two points. Moves smaller than
    0.05 count as stable.
    """
    recent = list(history)[-TREND_LOOKBACK_POINTS:]
    if len(recent) < 2:
        return None

    diff = recent[-1].acwr - recent[0].acwr
    if abs(diff) < TREND_STABLE_TOLERANCE:
        return TrendDirection.STABLE
    if diff > 0:
        return TrendDirection.INCREASING
    return TrendDirection.DECREASING
