# src/a11y_auditor/managers/report_manager.py
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from a11y_auditor.model import AnalysisReport, ReportRecord, ReportSummary
from a11y_auditor.utils.config_loader import get_nested_config
from a11y_auditor.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

REPORT_FILENAME = "a11y-report-{date}.json"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReportManager:
    """
    Turns an AnalysisReport into the downloadable JSON report record.
    The generation timestamp is stamped here, never by the rule engine.
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now, indent: Optional[int] = None):
        self.clock = clock
        self.indent = indent if indent is not None else get_nested_config("report.indent", 2)

    def build_record(self, report: AnalysisReport, generated_at: Optional[datetime] = None) -> ReportRecord:
        generated_at = generated_at or self.clock()
        return ReportRecord(
            timestamp=generated_at.isoformat(),
            summary=ReportSummary(
                total=report.total,
                errors=report.errors,
                warnings=report.warnings,
                info=report.info
            ),
            issues=list(report.findings)
        )

    def to_json(self, report: AnalysisReport, generated_at: Optional[datetime] = None) -> str:
        return self.build_record(report, generated_at).model_dump_json(indent=self.indent)

    @staticmethod
    def filename_for(generated_at: datetime) -> str:
        return REPORT_FILENAME.format(date=generated_at.date().isoformat())

    def save(self, report: AnalysisReport, directory: Optional[Path] = None) -> Path:
        """
        Writes the report record to '<directory>/a11y-report-<date>.json'.

        Returns:
            Path: The file that was written.
        """
        generated_at = self.clock()
        target_dir = Path(directory) if directory else PathUtils.get_report_dir(
            get_nested_config("report.directory", ".")
        )
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / self.filename_for(generated_at)

        try:
            path.write_text(self.to_json(report, generated_at), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save report '{path}': {e}")
            raise

        logger.info(f"Report saved to {path}")
        return path
