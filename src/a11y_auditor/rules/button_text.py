# src/a11y_auditor/rules/button_text.py
from typing import List
from ..dom.core import RuleDefinition, audit_spec
from ..dom.models import HTMLDocument
from ..model import Finding, Severity
from ..utils.suggestions import NON_DESCRIPTIVE_BUTTON_TEXTS, get_better_button_text


@audit_spec(codes=["NON_DESCRIPTIVE_BUTTON"])
def check_button_text(doc: HTMLDocument) -> List[Finding]:
    res = []
    for button in doc.find_all("button"):
        text = button.text_content.lower()

        if text in NON_DESCRIPTIVE_BUTTON_TEXTS:
            res.append(Finding(
                code="NON_DESCRIPTIVE_BUTTON",
                severity=Severity.WARNING,
                title="Non-descriptive button text",
                description="Button text should clearly describe the action it performs.",
                offending_markup=button.markup,
                suggestion="Use more descriptive text that explains what the button does.",
                fixed_markup=f"<button>{get_better_button_text(text)}</button>"
            ))

    return res


DEFINITION = RuleDefinition(order=4, name="button_text", check=check_button_text)
