# src/a11y_auditor/dom/engine.py
import logging
from typing import List, Optional

from .core import RuleDefinition
from .models import HTMLDocument
from .registry import RuleRegistry
from ..model import Finding

logger = logging.getLogger(__name__)


class A11yEngine:
    """
    Accessibility engine for auditing HTML Documents.

    Runs every registered rule check against the parsed tree in the fixed rule
    order and concatenates the findings. A failing rule is logged and skipped;
    the remaining rules still run.
    """

    def __init__(self, rules: Optional[List[RuleDefinition]] = None):
        """Initializes the engine with the discovered rules unless an explicit list is given."""
        if rules is None:
            RuleRegistry.discover()
            rules = RuleRegistry.get_all_definitions()
        self.rules = rules

    def run_audit(self, doc: HTMLDocument) -> List[Finding]:
        """
        Runs the full rule suite on a parsed HTMLDocument.

        Args:
            doc (HTMLDocument): The parsed document.

        Returns:
            List[Finding]: Findings in rule order, document order within each rule.
        """
        findings: List[Finding] = []

        for rule in self.rules:
            try:
                results = rule.check(doc)
            except Exception as e:
                logger.error(f"Rule '{rule.name}' failed: {e}", exc_info=True)
                continue

            logger.debug(f"Rule '{rule.name}' produced {len(results)} finding(s)")
            findings.extend(results)

        return findings
