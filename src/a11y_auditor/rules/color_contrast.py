# src/a11y_auditor/rules/color_contrast.py
from typing import List
from ..dom.core import ElementNode, RuleDefinition, audit_spec
from ..dom.models import HTMLDocument
from ..model import Finding, Severity

# Plain substring match on the style attribute, not a CSS parse
STYLE_MARKERS = ("color", "background")


def has_inline_color_style(node: ElementNode) -> bool:
    style = node.get("style")
    if style is None:
        return False
    return any(marker in style for marker in STYLE_MARKERS)


@audit_spec(codes=["COLOR_CONTRAST"])
def check_color_styles(doc: HTMLDocument) -> List[Finding]:
    """
    Rule: inline color styles need a manual contrast review.
    Emits one document-level finding, no contrast ratio is computed.
    """
    count = sum(1 for node in doc.iter_elements() if has_inline_color_style(node))
    if not count:
        return []

    return [Finding(
        code="COLOR_CONTRAST",
        severity=Severity.INFO,
        title="Color contrast check needed",
        description="Elements with inline color styles should be checked for sufficient color contrast.",
        offending_markup=f"{count} elements with color styles found",
        suggestion=(
            "Use a color contrast checker to ensure text meets WCAG guidelines "
            "(4.5:1 for normal text, 3:1 for large text)."
        ),
        fixed_markup="<!-- Consider using CSS custom properties for consistent, accessible colors -->"
    )]


DEFINITION = RuleDefinition(order=6, name="color_contrast", check=check_color_styles)
