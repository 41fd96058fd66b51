# src/a11y_auditor/rules/aria_names.py
from typing import List
from ..dom.core import RuleDefinition, audit_spec
from ..dom.models import HTMLDocument
from ..model import Finding, Severity
from ..utils.suggestions import ARIA_LABEL_PLACEHOLDER

INTERACTIVE_TAGS = ("button", "a", "input", "textarea", "select")


@audit_spec(codes=["MISSING_ARIA"])
def check_accessible_name(doc: HTMLDocument) -> List[Finding]:
    """
    Rule: interactive elements need some accessible name.
    Elements carrying aria-label or aria-labelledby (even empty) are skipped.
    """
    res = []
    for element in doc.find_all(*INTERACTIVE_TAGS):
        if element.has_attr("aria-label") or element.has_attr("aria-labelledby"):
            continue

        if element.text_content or element.get("placeholder") or element.get("title"):
            continue

        res.append(Finding(
            code="MISSING_ARIA",
            severity=Severity.INFO,
            title="Interactive element may need ARIA attributes",
            description="Interactive elements without visible text may need ARIA attributes for screen readers.",
            offending_markup=element.markup,
            suggestion="Add aria-label, aria-labelledby, or ensure the element has accessible text content.",
            fixed_markup=(
                f'<{element.tag} aria-label="{ARIA_LABEL_PLACEHOLDER}">'
                f'{element.inner_markup}</{element.tag}>'
            )
        ))

    return res


DEFINITION = RuleDefinition(order=5, name="aria_names", check=check_accessible_name)
