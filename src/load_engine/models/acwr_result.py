"""Result types produced by the ACWR pipeline.

Every value here is recomputed per query; nothing is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from load_engine.models.daily_load import DailyLoad
from load_engine.models.enums import TrendDirection, Zone


@dataclass(frozen=True)
class ACWRResult:
    """Current Acute:Chronic Workload Ratio snapshot for one athlete.

    ``acwr`` is None exactly when the ratio could not be computed, in
    which case ``zone`` is ``Zone.INSUFFICIENT``. Loads are rounded to
    one decimal, the ratio to two.
    """

    acwr: float | None
    acute_load: float
    chronic_load: float
    zone: Zone
    days_with_data: int


@dataclass(frozen=True)
class ACWRHistoryPoint:
    """ACWR for one historical day. Never carries a None ratio."""

    date: date
    acwr: float


@dataclass(frozen=True)
class ACWRReport:
    """Everything the athlete detail view needs in one object."""

    athlete_id: str
    anchor_date: date
    result: ACWRResult
    trend: tuple[DailyLoad, ...] = field(default_factory=tuple)
    history: tuple[ACWRHistoryPoint, ...] = field(default_factory=tuple)
    trend_direction: TrendDirection | None = None


@dataclass(frozen=True)
class RosterEntry:
    """Per-athlete line of a roster-wide summary."""

    weekly_miles: float
    acwr: float | None
    zone: Zone
