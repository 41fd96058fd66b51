# src/a11y_auditor/rules/heading_order.py
from typing import List
from ..dom.core import ElementNode, RuleDefinition, audit_spec
from ..dom.models import HTMLDocument
from ..model import Finding, Severity

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def heading_level(node: ElementNode) -> int:
    """Extracts the hierarchy level from the tag name (e.g., 'h3' -> 3)."""
    return int(node.tag[1])


@audit_spec(codes=["SKIPPED_HEADING"])
def check_heading_hierarchy(doc: HTMLDocument) -> List[Finding]:
    """
    Rule: heading levels must not skip a level going down the document.
    Each heading is compared with the heading right before it, skipped or not.
    """
    res = []
    previous_level = 0

    for heading in doc.find_all(*HEADING_TAGS):
        current_level = heading_level(heading)

        if current_level - previous_level > 1:
            res.append(Finding(
                code="SKIPPED_HEADING",
                severity=Severity.WARNING,
                title="Skipped heading level",
                description=(
                    f"Heading hierarchy jumps from h{previous_level} to h{current_level}, "
                    "which can confuse screen reader users."
                ),
                offending_markup=heading.markup,
                suggestion="Use heading levels in sequential order (h1 → h2 → h3, etc.).",
                fixed_markup=f"<!-- Add missing h{previous_level + 1} heading before this -->\n{heading.markup}"
            ))

        previous_level = current_level

    return res


DEFINITION = RuleDefinition(order=3, name="heading_order", check=check_heading_hierarchy)
