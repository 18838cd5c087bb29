"""Environment-variable-based configuration for the roster report job."""

from __future__ import annotations

import os

SUPABASE_URL: str = os.environ.get("SUPABASE_URL", "")
SUPABASE_KEY: str = os.environ.get("SUPABASE_KEY", "")
ROSTER_ATHLETE_IDS: list[str] = [
    athlete_id.strip()
    for athlete_id in os.environ.get("ROSTER_ATHLETE_IDS", "").split(",")
    if athlete_id.strip()
]
REPORT_HOUR: int = int(os.environ.get("REPORT_HOUR", "6"))
REPORT_MINUTE: int = int(os.environ.get("REPORT_MINUTE", "0"))
LOG_SOURCE_TIMEOUT_S: float = float(os.environ.get("LOG_SOURCE_TIMEOUT_S", "10"))
