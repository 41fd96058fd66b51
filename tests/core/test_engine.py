# tests/core/test_engine.py
import pytest
from unittest.mock import MagicMock

from a11y_auditor.controllers.audit_controller import AnalysisError, AuditController, analyze
from a11y_auditor.dom.builder import DOMBuilder, TreeAcquisitionError
from a11y_auditor.dom.core import RuleDefinition
from a11y_auditor.dom.engine import A11yEngine
from a11y_auditor.dom.registry import RuleRegistry
from a11y_auditor.model import AnalysisReport, Finding, Severity
from a11y_auditor.utils.samples import SAMPLE_HTML

CLEAN_HTML = """
<h1>Contact</h1>
<img src="logo.png" alt="Company logo">
<label for="email">Email</label>
<input id="email" name="email" type="email" placeholder="you@example.com">
<h2>Newsletter</h2>
<button>Send message</button>
<a href="/privacy">Privacy policy</a>
"""


def _finding(code: str, severity: Severity) -> Finding:
    return Finding(
        code=code, severity=severity, title=code, description="d",
        offending_markup="<x>", suggestion="s", fixed_markup="<y>"
    )


def test_registry_discovers_rules_in_fixed_order():
    RuleRegistry.discover()
    names = [d.name for d in RuleRegistry.get_all_definitions()]
    assert names == ["image_alt", "form_labels", "heading_order", "button_text", "aria_names", "color_contrast"]


def test_registry_collects_issue_codes():
    RuleRegistry.discover()
    assert RuleRegistry.get_all_possible_codes() == sorted([
        "MISSING_ALT", "EMPTY_ALT", "MISSING_ID_NAME", "MISSING_LABEL", "SKIPPED_HEADING",
        "NON_DESCRIPTIVE_BUTTON", "MISSING_ARIA", "COLOR_CONTRAST"
    ])


def test_clean_document_yields_empty_report():
    report = analyze(CLEAN_HTML)

    assert report.findings == ()
    assert (report.errors, report.warnings, report.info) == (0, 0, 0)
    assert report.is_clean
    assert report.status == "No issues found"


def test_findings_follow_rule_order_not_document_order():
    html = '<p style="color: red">x</p><h3>Late</h3><img src="a.png"><button>ok</button>'
    report = analyze(html)

    assert [f.code for f in report.findings] == [
        "MISSING_ALT", "SKIPPED_HEADING", "NON_DESCRIPTIVE_BUTTON", "COLOR_CONTRAST"
    ]


def test_reordering_siblings_reorders_within_rule_only():
    first = analyze('<img src="a.png"><h3>H</h3><img src="b.png">')
    second = analyze('<img src="b.png"><h3>H</h3><img src="a.png">')

    assert [f.code for f in first.findings] == [f.code for f in second.findings]
    assert first.findings[0].fixed_markup == second.findings[1].fixed_markup
    assert first.findings[1].fixed_markup == second.findings[0].fixed_markup


def test_color_finding_counts_all_styled_elements():
    report = analyze('<p style="color:red">a</p><p style="color:blue">b</p><p style="background:red">c</p>')

    assert report.info == 1
    assert report.findings[0].offending_markup == "3 elements with color styles found"


def test_analyze_is_idempotent():
    assert analyze(SAMPLE_HTML) == analyze(SAMPLE_HTML)


def test_sample_page_report():
    report = analyze(SAMPLE_HTML)

    assert [f.code for f in report.findings] == [
        "MISSING_ALT",
        "MISSING_ID_NAME", "MISSING_ID_NAME", "MISSING_ID_NAME",
        "NON_DESCRIPTIVE_BUTTON", "NON_DESCRIPTIVE_BUTTON",
    ]
    assert (report.errors, report.warnings, report.info) == (4, 2, 0)
    assert report.status == "4 critical issues found"


def test_failing_rule_does_not_stop_the_others():
    def broken_rule(doc):
        raise RuntimeError("boom")

    def fine_rule(doc):
        return [_finding("FINE", Severity.INFO)]

    engine = A11yEngine(rules=[
        RuleDefinition(order=1, name="broken", check=broken_rule),
        RuleDefinition(order=2, name="fine", check=fine_rule),
    ])
    findings = engine.run_audit(DOMBuilder().parse_doc("<p>x</p>"))

    assert [f.code for f in findings] == ["FINE"]


def test_tree_acquisition_failure_aborts_analysis():
    builder = MagicMock()
    builder.parse_doc.side_effect = TreeAcquisitionError("unparsable")
    engine = MagicMock()

    controller = AuditController(builder=builder, engine=engine)
    with pytest.raises(AnalysisError):
        controller.analyze("<div>")

    engine.run_audit.assert_not_called()


def test_report_counts_partition_by_severity():
    findings = [
        _finding("A", Severity.WARNING),
        _finding("B", Severity.ERROR),
        _finding("C", Severity.INFO),
        _finding("D", Severity.WARNING),
    ]
    report = AnalysisReport.from_findings(findings)

    assert [f.code for f in report.findings] == ["A", "B", "C", "D"]
    assert (report.errors, report.warnings, report.info, report.total) == (1, 2, 1, 4)
    assert report.status == "1 critical issues found"


@pytest.mark.parametrize("severities, status", [
    ([Severity.WARNING, Severity.INFO], "1 warnings found"),
    ([Severity.INFO], "Analysis complete"),
])
def test_report_status_line(severities, status):
    report = AnalysisReport.from_findings(_finding("X", s) for s in severities)
    assert report.status == status


def test_deeply_nested_image_is_still_reported():
    report = analyze("<div>" * 1200 + '<img src="a.png">' + "</div>" * 1200)
    assert [f.code for f in report.findings] == ["MISSING_ALT"]


def test_duplicate_alt_uses_first_value():
    report = analyze('<img src="a.png" alt="" alt="Logo">')

    assert [f.code for f in report.findings] == ["EMPTY_ALT"]
    assert report.findings[0].fixed_markup == '<img src="a.png" alt="">'


def test_markup_inside_textarea_is_not_audited():
    assert analyze('<label for="t">T</label><textarea id="t"><img src="x"></textarea>').is_clean
