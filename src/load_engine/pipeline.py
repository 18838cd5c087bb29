"""Per-athlete load pipeline shared by single-athlete queries and roster batches.

Both call sites go through :func:`analyze_athlete`, so a roster summary
and an athlete detail view can never disagree for the same inputs.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping, Sequence

from load_engine.math.daily_load import aggregate_samples
from load_engine.math.training_load import compute_acwr
from load_engine.math.units import round_half_up
from load_engine.models.acwr_result import ACWRResult, RosterEntry
from load_engine.models.daily_load import DailyLoadSeries
from load_engine.models.enums import LOAD_WINDOW_DAYS
from load_engine.models.workout_log import WorkoutLogSample


@dataclass(frozen=True)
class AthleteAnalysis:
    """Intermediate and final outputs of one athlete's pipeline run."""

    athlete_id: str
    series: DailyLoadSeries
    weekly_miles: float
    result: ACWRResult

    def to_roster_entry(self) -> RosterEntry:
        return RosterEntry(
            weekly_miles=round_half_up(self.weekly_miles, 1),
            acwr=self.result.acwr,
            zone=self.result.zone,
        )


def group_by_athlete(samples: Iterable[WorkoutLogSample]) -> dict[str, list[WorkoutLogSample]]:
    """Split a shared fetch into per-athlete sample lists."""
    grouped: dict[str, list[WorkoutLogSample]] = defaultdict(list)
    for sample in samples:
        grouped[sample.athlete_id].append(sample)
    return dict(grouped)


def analyze_athlete(
    athlete_id: str,
    samples: Iterable[WorkoutLogSample],
    anchor_date: date,
    window_days: int = LOAD_WINDOW_DAYS,
) -> AthleteAnalysis:
    """Run aggregation, smoothing and classification for one athlete.

    Samples belonging to other athletes are ignored.
    """
    own = (s for s in samples if s.athlete_id == athlete_id)
    aggregate = aggregate_samples(own, anchor_date, window_days)
    return AthleteAnalysis(
        athlete_id=athlete_id,
        series=aggregate.series,
        weekly_miles=aggregate.weekly_miles,
        result=compute_acwr(aggregate.series),
    )


def compute_for_roster(
    athlete_ids: Sequence[str],
    logs_by_athlete: Mapping[str, Sequence[WorkoutLogSample]],
    anchor_date: date,
    window_days: int = LOAD_WINDOW_DAYS,
) -> dict[str, RosterEntry]:
    """Summarise every athlete in a roster against the same anchor date.

    Args:
        athlete_ids: Roster to summarise. Every id gets an entry, even
            without any samples.
        logs_by_athlete: Samples keyed by athlete id, from one shared fetch.
        anchor_date: "Today" for every athlete in the batch.
        window_days: Length of each athlete's daily load series.

    Returns:
        Mapping of athlete id to RosterEntry, in roster order.
    """
    summary: dict[str, RosterEntry] = {}
    for athlete_id in athlete_ids:
        analysis = analyze_athlete(
            athlete_id,
            logs_by_athlete.get(athlete_id, ()),
            anchor_date,
            window_days,
        )
        summary[athlete_id] = analysis.to_roster_entry()
    return summary
