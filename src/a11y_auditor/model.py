# src/a11y_auditor/model.py
from enum import Enum
from typing import Dict, Iterable, List, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Finding(BaseModel):
    """
    Data model representing a single accessibility defect reported by a rule check.
    Carries no identity beyond its content.
    """
    model_config = ConfigDict(frozen=True)

    # Classification
    code: str  # e.g., 'MISSING_ALT', 'SKIPPED_HEADING', 'COLOR_CONTRAST'
    severity: Severity

    # Content
    title: str
    description: str
    offending_markup: str  # Serialized offending node, or a count message for aggregate findings
    suggestion: str
    fixed_markup: str  # Markup snippet demonstrating the fix


class AnalysisReport(BaseModel):
    """
    Ordered findings of one analysis run plus the severity counts derived from them.
    """
    model_config = ConfigDict(frozen=True)

    findings: Tuple[Finding, ...] = ()
    errors: int = 0
    warnings: int = 0
    info: int = 0

    @classmethod
    def from_findings(cls, findings: Iterable[Finding]) -> "AnalysisReport":
        """Aggregates findings without reordering them."""
        ordered = tuple(findings)
        counts: Dict[Severity, int] = {severity: 0 for severity in Severity}
        for finding in ordered:
            counts[finding.severity] += 1

        return cls(
            findings=ordered,
            errors=counts[Severity.ERROR],
            warnings=counts[Severity.WARNING],
            info=counts[Severity.INFO]
        )

    @property
    def total(self) -> int:
        return len(self.findings)

    @property
    def is_clean(self) -> bool:
        return not self.findings

    @property
    def status(self) -> str:
        """Status line shown alongside the findings."""
        if self.is_clean:
            return "No issues found"
        if self.errors:
            return f"{self.errors} critical issues found"
        if self.warnings:
            return f"{self.warnings} warnings found"
        return "Analysis complete"


class ReportSummary(BaseModel):
    total: int
    errors: int
    warnings: int
    info: int


class ReportRecord(BaseModel):
    """
    Serializable record of an analysis run, as written to 'a11y-report-<date>.json'.
    The timestamp is stamped by the ReportManager, never by the rule engine.
    """
    timestamp: str  # ISO-8601
    summary: ReportSummary
    issues: List[Finding] = Field(default_factory=list)
