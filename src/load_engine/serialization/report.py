"""JSON serialization for ACWR results, reports and roster summaries.

Keys follow the camelCase payload the athlete dashboard consumes.
Dates are ISO strings, zones and trend directions their string values.

All functions are pure (no I/O, no network calls).
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from load_engine.models.acwr_result import ACWRReport, ACWRResult, RosterEntry
from load_engine.models.enums import ZONE_DESCRIPTIONS


def result_to_dict(result: ACWRResult) -> dict[str, Any]:
    """Convert an ACWRResult to a dashboard-compatible dict."""
    label, description = ZONE_DESCRIPTIONS[result.zone]
    return {
        "acwr": result.acwr,
        "acuteLoad": result.acute_load,
        "chronicLoad": result.chronic_load,
        "zone": result.zone.value,
        "zoneLabel": label,
        "zoneDescription": description,
        "daysWithData": result.days_with_data,
    }


def report_to_dict(report: ACWRReport) -> dict[str, Any]:
    """Convert a full ACWRReport, including trend and history."""
    payload = result_to_dict(report.result)
    payload.update(
        {
            "athleteId": report.athlete_id,
            "asOf": report.anchor_date.isoformat(),
            "trend": [{"date": d.date.isoformat(), "load": d.load} for d in report.trend],
            "acwrHistory": [{"date": p.date.isoformat(), "acwr": p.acwr} for p in report.history],
            "trendDirection": report.trend_direction.value if report.trend_direction else None,
        }
    )
    return payload


def roster_summary_to_dict(summary: Mapping[str, RosterEntry]) -> dict[str, dict[str, Any]]:
    """Convert a roster summary keyed by athlete id."""
    return {
        athlete_id: {
            "weeklyMiles": entry.weekly_miles,
            "acwr": entry.acwr,
            "zone": entry.zone.value,
        }
        for athlete_id, entry in summary.items()
    }


def to_json_string(payload: Mapping[str, Any], indent: int = 2) -> str:
    """Serialize a converted payload to a JSON string."""
    return json.dumps(payload, indent=indent)
