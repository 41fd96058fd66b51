# src/a11y_auditor/utils/render.py
import html
from typing import List

from a11y_auditor.model import AnalysisReport, Finding, Severity

SEVERITY_ICONS = {
    Severity.ERROR: "❌",
    Severity.WARNING: "⚠️",
    Severity.INFO: "ℹ️",
}


def escape_markup(text: str) -> str:
    """Escapes &, <, > and quotes so a markup snippet can be embedded as text in HTML."""
    return html.escape(text, quote=True)


def _indent(text: str, prefix: str = "      ") -> str:
    return "\n".join(prefix + line for line in text.splitlines() or [""])


def render_finding(finding: Finding, index: int) -> str:
    """Renders one finding as a plain-text card."""
    lines = [
        f"{SEVERITY_ICONS[finding.severity]} [{index}] {finding.title} ({finding.code})",
        f"    {finding.description}",
        "    Current code:",
        _indent(finding.offending_markup),
        f"    Suggestion: {finding.suggestion}",
        "    Fixed code:",
        _indent(finding.fixed_markup),
    ]
    return "\n".join(lines)


def render_report(report: AnalysisReport, label: str = "") -> str:
    header = f"== {label} ==\n" if label else ""
    if report.is_clean:
        return f"{header}✅ {report.status}. No accessibility issues found in your HTML code."

    parts: List[str] = [
        f"{header}{report.status}",
        f"Errors: {report.errors}  Warnings: {report.warnings}  Info: {report.info}",
    ]
    parts.extend(render_finding(finding, i) for i, finding in enumerate(report.findings, start=1))
    return "\n\n".join(parts)
