"""Tests for the roster report job."""

from __future__ import annotations

import logging

from load_engine.engine import LoadEngine
from load_engine.models.enums import Zone
from log_source.exceptions import DataUnavailableError
from scheduler.nightly import report_job


def _spiking_runs(make_sample, athlete_id: str):
    base = [make_sample(days_ago=d, distance=2.0, effort=8, athlete_id=athlete_id) for d in range(7, 35)]
    spike = [make_sample(days_ago=d, distance=12.0, effort=8, athlete_id=athlete_id) for d in range(7)]
    return base + spike


class TestReportJob:
    def test_returns_summary(self, fake_log_source, make_sample, anchor) -> None:
        engine = LoadEngine(fake_log_source(_spiking_runs(make_sample, "a")))
        summary = report_job(engine=engine, athlete_ids=["a", "b"], today=anchor)
        assert summary is not None
        assert summary["a"].zone in (Zone.DANGER, Zone.CRITICAL)
        assert summary["b"].zone == Zone.INSUFFICIENT

    def test_high_risk_logged_as_warning(self, fake_log_source, make_sample, anchor, caplog) -> None:
        engine = LoadEngine(fake_log_source(_spiking_runs(make_sample, "a")))
        with caplog.at_level(logging.INFO, logger="scheduler.nightly"):
            report_job(engine=engine, athlete_ids=["a"], today=anchor)
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "a:" in warnings[0].getMessage()

    def test_data_unavailable_handled(self, fake_log_source, anchor, caplog) -> None:
        engine = LoadEngine(fake_log_source(error=DataUnavailableError("down")))
        with caplog.at_level(logging.ERROR, logger="scheduler.nightly"):
            assert report_job(engine=engine, athlete_ids=["a"], today=anchor) is None
        assert "unavailable" in caplog.text

    def test_empty_roster(self, fake_log_source, anchor) -> None:
        engine = LoadEngine(fake_log_source())
        assert report_job(engine=engine, athlete_ids=[], today=anchor) is None

    def test_prints_json(self, fake_log_source, anchor, capsys) -> None:
        engine = LoadEngine(fake_log_source())
        report_job(engine=engine, athlete_ids=["a"], today=anchor, print_json=True)
        assert '"zone": "insufficient"' in capsys.readouterr().out
