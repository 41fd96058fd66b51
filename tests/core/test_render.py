# tests/core/test_render.py
from a11y_auditor.controllers.audit_controller import analyze
from a11y_auditor.model import AnalysisReport, Severity
from a11y_auditor.utils.render import SEVERITY_ICONS, escape_markup, render_finding, render_report


def test_escape_markup_covers_html_specials():
    assert escape_markup('<img src="a&b.png">') == "&lt;img src=&quot;a&amp;b.png&quot;&gt;"


def test_every_severity_has_an_icon():
    assert set(SEVERITY_ICONS) == set(Severity)


def test_render_finding_card():
    finding = analyze('<h1>A</h1><h3>B</h3>').findings[0]
    card = render_finding(finding, 1)

    assert card.startswith(f"{SEVERITY_ICONS[Severity.WARNING]} [1] Skipped heading level (SKIPPED_HEADING)")
    assert "Current code:\n      <h3>B</h3>" in card
    assert "      <!-- Add missing h2 heading before this -->\n      <h3>B</h3>" in card


def test_render_clean_report_with_label():
    text = render_report(AnalysisReport.from_findings([]), "page.html")
    assert text.startswith("== page.html ==\n")
    assert "No issues found" in text
