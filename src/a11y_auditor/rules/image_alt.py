# src/a11y_auditor/rules/image_alt.py
from typing import List
from ..dom.core import RuleDefinition, audit_spec
from ..dom.models import HTMLDocument
from ..model import Finding, Severity
from ..utils.suggestions import ALT_PLACEHOLDER


@audit_spec(codes=["MISSING_ALT", "EMPTY_ALT"])
def check_alt_text(doc: HTMLDocument) -> List[Finding]:
    res = []
    for img in doc.find_all("img"):
        src = img.get("src", "")
        alt = img.get("alt")

        # alt=None means the attribute is missing
        if alt is None:
            res.append(Finding(
                code="MISSING_ALT",
                severity=Severity.ERROR,
                title="Missing alt attribute on image",
                description="Images without alt text are not accessible to screen readers.",
                offending_markup=img.markup,
                suggestion="Add a descriptive alt attribute to the image.",
                fixed_markup=f'<img src="{src}" alt="{ALT_PLACEHOLDER}">'
            ))
        elif not alt.strip():
            # Exactly "" reads as decorative; whitespace-only is treated as an accident
            fixed_alt = "" if alt == "" else ALT_PLACEHOLDER
            res.append(Finding(
                code="EMPTY_ALT",
                severity=Severity.WARNING,
                title="Empty alt attribute on image",
                description=(
                    "Empty alt attributes may indicate decorative images that should be "
                    "hidden from screen readers."
                ),
                offending_markup=img.markup,
                suggestion='Either add descriptive alt text or use alt="" for decorative images.',
                fixed_markup=f'<img src="{src}" alt="{fixed_alt}">'
            ))

    return res


DEFINITION = RuleDefinition(order=1, name="image_alt", check=check_alt_text)
