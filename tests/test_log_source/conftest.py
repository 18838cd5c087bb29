"""Fixtures with realistic workout_logs rows as returned by the REST API."""

from __future__ import annotations

import pytest


@pytest.fixture
def scheduled_log_row() -> dict:
    """A log attached to a scheduled workout, with the embedded schedule."""
    return {
        "id": "7f1c9a52-0b1e-4d7a-9a44-1f0f5d3e2a10",
        "team_athlete_id": "ath-1",
        "distance_value": 6.5,
        "distance_unit": "mile",
        "effort_level": 7,
        "scheduled_workouts": {"scheduled_date": "2026-03-30"},
    }


@pytest.fixture
def personal_log_row() -> dict:
    """An unscheduled (personal) log dated by workout_date."""
    return {
        "id": "c2d8e4f0-5a9b-4c3d-8e7f-6a5b4c3d2e1f",
        "team_athlete_id": "ath-2",
        "distance_value": "10.0",
        "distance_unit": "km",
        "effort_level": None,
        "workout_date": "2026-03-29",
    }
