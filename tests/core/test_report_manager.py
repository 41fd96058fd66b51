# tests/core/test_report_manager.py
import json
from datetime import datetime, timezone

import pytest

from a11y_auditor.controllers.audit_controller import analyze
from a11y_auditor.managers.report_manager import ReportManager
from a11y_auditor.model import AnalysisReport
from a11y_auditor.utils.samples import SAMPLE_HTML

FIXED_NOW = datetime(2026, 10, 18, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def manager():
    return ReportManager(clock=lambda: FIXED_NOW, indent=2)


def test_build_record_summary(manager):
    report = analyze(SAMPLE_HTML)
    record = manager.build_record(report)

    assert record.timestamp == "2026-10-18T12:30:00+00:00"
    assert record.summary.model_dump() == {"total": 6, "errors": 4, "warnings": 2, "info": 0}
    assert record.issues == list(report.findings)


def test_save_writes_dated_json_file(manager, tmp_path):
    report = analyze('<img src="a.png"><button>Click</button>')
    path = manager.save(report, tmp_path)

    assert path == tmp_path / "a11y-report-2026-10-18.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["summary"] == {"total": 2, "errors": 1, "warnings": 1, "info": 0}
    assert [issue["severity"] for issue in data["issues"]] == ["error", "warning"]
    assert data["issues"][1]["fixed_markup"] == "<button>View details</button>"


def test_clean_report_is_still_saved(manager, tmp_path):
    path = manager.save(AnalysisReport.from_findings([]), tmp_path / "nested")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["summary"]["total"] == 0
    assert data["issues"] == []


def test_core_does_not_stamp_time():
    """Two reports for the same input are equal; only the manager adds a timestamp."""
    first = ReportManager(clock=lambda: FIXED_NOW).to_json(analyze(SAMPLE_HTML))
    second = ReportManager(clock=lambda: FIXED_NOW).to_json(analyze(SAMPLE_HTML))
    assert first == second
