"""Pure functions mapping raw ``workout_logs`` rows to WorkoutLogSample.

No I/O. Takes row dicts as returned by the data store's REST API and
returns engine samples. Rows that cannot be dated or attributed to an
athlete map to None.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Any, Iterable, Optional

from load_engine.models.enums import DistanceUnit
from load_engine.models.workout_log import WorkoutLogSample

logger = logging.getLogger(__name__)


def map_scheduled_log(row: dict[str, Any]) -> Optional[WorkoutLogSample]:
    """Map a log attached to a scheduled workout, dated by its scheduled date."""
    return _build_sample(row, _extract_scheduled_date(row.get("scheduled_workouts")))


def map_personal_log(row: dict[str, Any]) -> Optional[WorkoutLogSample]:
    """Map an unscheduled (personal) log, dated by its own workout_date."""
    return _build_sample(row, _parse_date(row.get("workout_date")))


def map_rows(rows: Iterable[dict[str, Any]], scheduled: bool) -> list[WorkoutLogSample]:
    """Map a page of rows, dropping those that map to None."""
    mapper = map_scheduled_log if scheduled else map_personal_log
    samples: list[WorkoutLogSample] = []
    for row in rows:
        sample = mapper(row)
        if sample is None:
            logger.debug("Skipping unmappable workout log %s", row.get("id"))
            continue
        samples.append(sample)
    return samples


# ---------------------------------------------------------------------------
# Internal extractors, each handles None input gracefully
# ---------------------------------------------------------------------------


def _build_sample(row: dict[str, Any], workout_date: Optional[date]) -> Optional[WorkoutLogSample]:
    athlete_id = row.get("team_athlete_id")
    if not athlete_id or workout_date is None:
        return None
    return WorkoutLogSample(
        athlete_id=str(athlete_id),
        date=workout_date,
        distance_value=_parse_float(row.get("distance_value")),
        distance_unit=_parse_unit(row.get("distance_unit")),
        effort_level=_parse_int(row.get("effort_level")),
    )


def _extract_scheduled_date(embedded: Any) -> Optional[date]:
    """Read scheduled_date from the embedded scheduled_workouts resource.

    PostgREST returns a to-one embed as a dict, but a list is accepted too.
    """
    if isinstance(embedded, list):
        embedded = embedded[0] if embedded else None
    if not isinstance(embedded, dict):
        return None
    return _parse_date(embedded.get("scheduled_date"))


def _parse_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def _parse_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _parse_int(value: Any) -> Optional[int]:
    number = _parse_float(value)
    if number is None:
        return None
    return int(round(number))


def _parse_unit(value: Any) -> DistanceUnit:
    if isinstance(value, str) and value.strip().lower() == DistanceUnit.KM.value:
        return DistanceUnit.KM
    return DistanceUnit.MILE
