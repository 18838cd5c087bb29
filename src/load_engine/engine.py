"""LoadEngine: read-only ACWR queries over a workout log source."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Sequence

from load_engine.math.history import build_acwr_history, raw_load_trend, trend_direction
from load_engine.models.acwr_result import (
    ACWRHistoryPoint,
    ACWRReport,
    ACWRResult,
    RosterEntry,
)
from load_engine.models.enums import LOAD_WINDOW_DAYS, Zone
from load_engine.pipeline import AthleteAnalysis, analyze_athlete, compute_for_roster, group_by_athlete
from log_source.base import LogSource

logger = logging.getLogger(__name__)


class LoadEngine:
    """Answers training-load queries by fetching logs and running the pipeline.

    Stateless between calls: each query re-fetches and recomputes, and
    the anchor date is always passed in. Errors raised by the log source
    propagate unchanged.

    Usage:
        engine = LoadEngine(SupabaseLogSource(url, key))
        result = engine.get_current_acwr("athlete-1", date.today())
        summary = engine.get_roster_summary(["a", "b"], date.today())
    """

    def __init__(self, log_source: LogSource, window_days: int = LOAD_WINDOW_DAYS) -> None:
        self.log_source = log_source
        self.window_days = window_days

    # ------------------------------------------------------------------
    # Single athlete
    # ------------------------------------------------------------------

    def get_current_acwr(self, athlete_id: str, today: date) -> ACWRResult:
        """Current ACWR snapshot for one athlete."""
        return self._analyze(athlete_id, today).result

    def get_acwr_history(self, athlete_id: str, today: date) -> list[ACWRHistoryPoint]:
        """ACWR history for the window, empty while the snapshot is insufficient."""
        analysis = self._analyze(athlete_id, today)
        if analysis.result.zone == Zone.INSUFFICIENT:
            return []
        return build_acwr_history(analysis.series)

    def get_athlete_report(self, athlete_id: str, today: date) -> ACWRReport:
        """Snapshot, raw 14-day trend, history and trend direction in one fetch."""
        analysis = self._analyze(athlete_id, today)
        history: list[ACWRHistoryPoint] = []
        if analysis.result.zone != Zone.INSUFFICIENT:
            history = build_acwr_history(analysis.series)
        return ACWRReport(
            athlete_id=athlete_id,
            anchor_date=today,
            result=analysis.result,
            trend=tuple(raw_load_trend(analysis.series)),
            history=tuple(history),
            trend_direction=trend_direction(history),
        )

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def get_roster_summary(self, athlete_ids: Sequence[str], today: date) -> dict[str, RosterEntry]:
        """Weekly miles, ACWR and zone for every athlete, from one shared fetch."""
        if not athlete_ids:
            return {}
        samples = self.log_source.fetch_logs(list(athlete_ids), self._window_start(today), today)
        summary = compute_for_roster(athlete_ids, group_by_athlete(samples), today, self.window_days)
        logger.info("Computed roster summary for %d athletes as of %s", len(summary), today.isoformat())
        return summary

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _window_start(self, today: date) -> date:
        return today - timedelta(days=self.window_days - 1)

    def _analyze(self, athlete_id: str, today: date) -> AthleteAnalysis:
        samples = self.log_source.fetch_logs([athlete_id], self._window_start(today), today)
        analysis = analyze_athlete(athlete_id, samples, today, self.window_days)
        logger.debug(
            "ACWR for %s as of %s: %s (%s, %d days with data)",
            athlete_id,
            today.isoformat(),
            analysis.result.acwr,
            analysis.result.zone.value,
            analysis.result.days_with_data,
        )
        return analysis
