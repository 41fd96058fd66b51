# src/a11y_auditor/controllers/audit_controller.py
import logging
from typing import Optional

from a11y_auditor.dom.builder import DOMBuilder, TreeAcquisitionError
from a11y_auditor.dom.engine import A11yEngine
from a11y_auditor.model import AnalysisReport

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    """Raised when a markup source cannot be analysed at all."""


class AuditController:
    """
    Orchestrates one analysis run: tree acquisition, rule evaluation, aggregation.
    Holds no per-run state, so one controller can serve any number of calls.
    """

    def __init__(self, builder: Optional[DOMBuilder] = None, engine: Optional[A11yEngine] = None):
        self.builder = builder or DOMBuilder()
        self.engine = engine or A11yEngine()

    def analyze(self, source: str) -> AnalysisReport:
        """
        Analyses a markup source and returns the aggregated report.

        Raises:
            AnalysisError: If the markup cannot be turned into a tree. No rule runs then.
        """
        try:
            doc = self.builder.parse_doc(source)
        except TreeAcquisitionError as e:
            logger.error(f"Analysis failed: {e}")
            raise AnalysisError("An error occurred during analysis.") from e

        findings = self.engine.run_audit(doc)
        report = AnalysisReport.from_findings(findings)

        logger.info(
            "Analysis complete: %d errors, %d warnings, %d info",
            report.errors, report.warnings, report.info
        )
        return report


def analyze(source: str) -> AnalysisReport:
    """Module-level entry point: analyse one markup string."""
    return AuditController().analyze(source)
