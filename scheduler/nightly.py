"""Roster report job: computes and logs the roster-wide ACWR summary.

Usage:
    python -m scheduler.nightly --once          # single run (for cron)
    python -m scheduler.nightly --once --json   # also print the summary as JSON
    python -m scheduler.nightly --daemon        # APScheduler loop
"""

from __future__ import annotations

import argparse
import logging
from datetime import date
from typing import Mapping

from load_engine.engine import LoadEngine
from load_engine.models.acwr_result import RosterEntry
from load_engine.models.enums import ZONE_DESCRIPTIONS, Zone
from load_engine.serialization import roster_summary_to_dict, to_json_string
from log_source import DataUnavailableError, SupabaseLogSource

from scheduler.config import (
    LOG_SOURCE_TIMEOUT_S,
    REPORT_HOUR,
    REPORT_MINUTE,
    ROSTER_ATHLETE_IDS,
    SUPABASE_KEY,
    SUPABASE_URL,
)

logger = logging.getLogger(__name__)

_HIGH_RISK_ZONES = frozenset({Zone.DANGER, Zone.CRITICAL})


def log_summary(summary: Mapping[str, RosterEntry]) -> None:
    """Log one line per athlete; high-risk zones are logged as warnings."""
    for athlete_id, entry in summary.items():
        label, _ = ZONE_DESCRIPTIONS[entry.zone]
        acwr = f"{entry.acwr:.2f}" if entry.acwr is not None else "--"
        level = logging.WARNING if entry.zone in _HIGH_RISK_ZONES else logging.INFO
        logger.log(
            level,
            "%s: %.1f mi this week, ACWR %s (%s)",
            athlete_id,
            entry.weekly_miles,
            acwr,
            label,
        )


def report_job(
    engine: LoadEngine | None = None,
    athlete_ids: list[str] | None = None,
    today: date | None = None,
    print_json: bool = False,
) -> dict[str, RosterEntry] | None:
    """Execute one report cycle: fetch the roster's logs once and summarise them."""
    logger.info("Starting roster report")

    roster = athlete_ids if athlete_ids is not None else ROSTER_ATHLETE_IDS
    if not roster:
        logger.error("No athletes configured (set ROSTER_ATHLETE_IDS)")
        return None

    if engine is None:
        engine = LoadEngine(
            SupabaseLogSource(SUPABASE_URL, SUPABASE_KEY, timeout_s=LOG_SOURCE_TIMEOUT_S)
        )

    try:
        summary = engine.get_roster_summary(roster, today or date.today())
    except DataUnavailableError as exc:
        logger.error("Workout logs unavailable: %s", exc)
        return None

    log_summary(summary)
    if print_json:
        print(to_json_string(roster_summary_to_dict(summary)))

    logger.info("Roster report complete")
    return summary


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(description="Training load roster report")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    args = parser.parse_args()

    if args.once:
        report_job(print_json=args.json)
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            report_job,
            "cron",
            hour=REPORT_HOUR,
            minute=REPORT_MINUTE,
            id="roster_report",
            kwargs={"print_json": args.json},
        )
        logger.info(
            "Scheduler started: roster report at %02d:%02d",
            REPORT_HOUR,
            REPORT_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
