"""Tests for ACWR history replay, raw load trend and trend direction."""

from __future__ import annotations

from datetime import timedelta

import pytest

from load_engine.math.history import build_acwr_history, raw_load_trend, trend_direction
from load_engine.models.acwr_result import ACWRHistoryPoint
from load_engine.models.enums import TrendDirection


class TestBuildACWRHistory:
    def test_constant_load_gives_eight_points_at_one(self, make_series, safe_daily_loads) -> None:
        series = make_series(safe_daily_loads)
        history = build_acwr_history(series)
        assert len(history) == 8
        assert all(p.acwr == pytest.approx(1.0) for p in history)

    def test_no_point_before_index_27(self, make_series, safe_daily_loads) -> None:
        series = make_series(safe_daily_loads)
        history = build_acwr_history(series)
        assert history[0].date == series.date_at(27)
        assert all(p.date >= series.date_at(27) for p in history)

    def test_last_point_is_anchor(self, make_series, safe_daily_loads, anchor) -> None:
        history = build_acwr_history(make_series(safe_daily_loads))
        assert history[-1].date == anchor

    def test_oldest_first(self, make_series, spiked_daily_loads) -> None:
        history = build_acwr_history(make_series(spiked_daily_loads))
        dates = [p.date for p in history]
        assert dates == sorted(dates)

    def test_zero_chronic_days_skipped(self, make_series) -> None:
        # Load only in the last 5 days: indices 27-29 have no chronic load
        loads = [0.0] * 30 + [20.0] * 5
        series = make_series(loads)
        history = build_acwr_history(series)
        assert len(history) == 5
        assert history[0].date == series.date_at(30)
        assert all(p.acwr is not None for p in history)

    def test_all_zero_is_empty(self, make_series) -> None:
        assert build_acwr_history(make_series([0.0] * 35)) == []

    def test_short_series_is_empty(self, make_series) -> None:
        assert build_acwr_history(make_series([10.0] * 27)) == []

    def test_spike_rises_over_history(self, make_series, spiked_daily_loads) -> None:
        history = build_acwr_history(make_series(spiked_daily_loads))
        assert history[-1].acwr > history[0].acwr


class TestRawLoadTrend:
    def test_last_fourteen_days(self, make_series, anchor) -> None:
        loads = list(range(35))
        trend = raw_load_trend(make_series(loads))
        assert len(trend) == 14
        assert trend[-1].date == anchor
        assert trend[0].date == anchor - timedelta(days=13)
        assert [d.load for d in trend] == [float(x) for x in range(21, 35)]

    def test_includes_rest_days(self, make_series) -> None:
        trend = raw_load_trend(make_series([0.0] * 35))
        assert len(trend) == 14
        assert all(d.load == 0.0 for d in trend)

    def test_custom_length(self, make_series) -> None:
        assert len(raw_load_trend(make_series([1.0] * 35), days=5)) == 5


class TestTrendDirection:
    def _history(self, make_series, *values: float) -> list[ACWRHistoryPoint]:
        series = make_series([0.0] * 35)
        return [ACWRHistoryPoint(date=series.date_at(27 + i), acwr=v) for i, v in enumerate(values)]

    def test_none_with_single_point(self, make_series) -> None:
        assert trend_direction(self._history(make_series, 1.0)) is None

    def test_none_when_empty(self) -> None:
        assert trend_direction([]) is None

    def test_stable(self, make_series) -> None:
        assert trend_direction(self._history(make_series, 1.0, 1.02, 1.04)) == TrendDirection.STABLE

    def test_increasing(self, make_series) -> None:
        assert trend_direction(self._history(make_series, 1.0, 1.1, 1.2)) == TrendDirection.INCREASING

    def test_decreasing(self, make_series) -> None:
        assert trend_direction(self._history(make_series, 1.3, 1.1, 0.9)) == TrendDirection.DECREASING

    def test_only_last_three_points_count(self, make_series) -> None:
        history = self._history(make_series, 0.5, 1.0, 1.0, 1.01)
        assert trend_direction(history) == TrendDirection.STABLE
