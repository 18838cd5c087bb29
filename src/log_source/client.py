"""Supabase (PostgREST) backed workout log source.

All methods wrap raw HTTP calls with error handling and retry logic.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from typing import Any, Sequence

import requests

from load_engine.models.workout_log import WorkoutLogSample
from log_source.base import LogSource
from log_source.exceptions import (
    DataUnavailableError,
    LogSourceAuthError,
    LogSourceRateLimitError,
)
from log_source.mapper import map_rows

logger = logging.getLogger(__name__)

_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2
_RETRYABLE_STATUS = frozenset({429, 503})
_PAGE_SIZE = 1000
_DEFAULT_TIMEOUT_S = 10.0

_LOG_COLUMNS = "id,team_athlete_id,distance_value,distance_unit,effort_level"


class SupabaseLogSource(LogSource):
    """Reads ``workout_logs`` from a Supabase project's REST endpoint."""

    def __init__(
        self,
        url: str,
        api_key: str,
        session: requests.Session | None = None,
        timeout_s: float = _DEFAULT_TIMEOUT_S,
    ) -> None:
        self._base_url = url.rstrip("/") + "/rest/v1"
        self._timeout_s = timeout_s
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            }
        )

    # ------------------------------------------------------------------
    # LogSource
    # ------------------------------------------------------------------

    def fetch_logs(
        self, athlete_ids: Sequence[str], start: date, end: date
    ) -> list[WorkoutLogSample]:
        """Fetch scheduled and personal logs for *athlete_ids* in [start, end]."""
        if not athlete_ids:
            return []

        scheduled = map_rows(self._fetch_scheduled(athlete_ids, start, end), scheduled=True)
        personal = map_rows(self._fetch_personal(athlete_ids, start, end), scheduled=False)
        logger.info(
            "Fetched %d scheduled and %d personal logs for %d athletes (%s..%s)",
            len(scheduled),
            len(personal),
            len(athlete_ids),
            start.isoformat(),
            end.isoformat(),
        )
        return scheduled + personal

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _fetch_scheduled(
        self, athlete_ids: Sequence[str], start: date, end: date
    ) -> list[dict[str, Any]]:
        params = [
            ("select", f"{_LOG_COLUMNS},scheduled_workouts!inner(scheduled_date)"),
            ("team_athlete_id", _in_filter(athlete_ids)),
            ("scheduled_workout_id", "not.is.null"),
            ("distance_value", "not.is.null"),
            ("scheduled_workouts.scheduled_date", f"gte.{start.isoformat()}"),
            ("scheduled_workouts.scheduled_date", f"lte.{end.isoformat()}"),
            ("order", "id.asc"),
        ]
        return self._get_all("workout_logs", params)

    def _fetch_personal(
        self, athlete_ids: Sequence[str], start: date, end: date
    ) -> list[dict[str, Any]]:
        params = [
            ("select", f"{_LOG_COLUMNS},workout_date"),
            ("team_athlete_id", _in_filter(athlete_ids)),
            ("scheduled_workout_id", "is.null"),
            ("distance_value", "not.is.null"),
            ("workout_date", f"gte.{start.isoformat()}"),
            ("workout_date", f"lte.{end.isoformat()}"),
            ("order", "workout_date.asc,id.asc"),
        ]
        return self._get_all("workout_logs", params)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get_all(self, table: str, params: list[tuple[str, str]]) -> list[dict[str, Any]]:
        """Page through a table query until a short page comes back."""
        rows: list[dict[str, Any]] = []
        offset = 0
        while True:
            page = self._safe_get(
                table,
                params + [("limit", str(_PAGE_SIZE)), ("offset", str(offset))],
            )
            rows.extend(page)
            if len(page) < _PAGE_SIZE:
                return rows
            offset += _PAGE_SIZE

    def _safe_get(self, table: str, params: list[tuple[str, str]]) -> list[dict[str, Any]]:
        """GET with retry + exponential backoff on 429 / 503."""
        url = f"{self._base_url}/{table}"
        for attempt in range(_MAX_RETRIES):
            try:
                resp = self._session.get(url, params=params, timeout=self._timeout_s)
            except requests.RequestException as exc:
                raise DataUnavailableError(f"Log source unreachable: {exc}") from exc

            status = resp.status_code
            if status in _RETRYABLE_STATUS:
                if attempt == _MAX_RETRIES - 1:
                    break
                wait = _BASE_BACKOFF_S * (2 ** attempt)
                logger.warning(
                    "Log source returned %d (attempt %d/%d), retrying in %ds",
                    status,
                    attempt + 1,
                    _MAX_RETRIES,
                    wait,
                )
                time.sleep(wait)
                continue
            if status in (401, 403):
                raise LogSourceAuthError(f"Log source rejected credentials: {resp.text}", status_code=status)
            if status >= 400:
                raise DataUnavailableError(f"Log source error {status}: {resp.text}", status_code=status)

            try:
                payload = resp.json()
            except ValueError as exc:
                raise DataUnavailableError(f"Invalid JSON from log source: {exc}", status_code=status) from exc
            if not isinstance(payload, list):
                raise DataUnavailableError(f"Unexpected response from log source: {payload}", status_code=status)
            return payload

        if status == 429:
            raise LogSourceRateLimitError(f"Rate limited after {_MAX_RETRIES} retries")
        raise DataUnavailableError(
            f"Log source unavailable after {_MAX_RETRIES} retries", status_code=status
        )


def _in_filter(values: Sequence[str]) -> str:
    quoted = ",".join(f'"{v}"' for v in values)
    return f"in.({quoted})"
