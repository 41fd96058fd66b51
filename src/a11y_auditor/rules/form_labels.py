# src/a11y_auditor/rules/form_labels.py
from typing import List, Set
from ..dom.core import ElementNode, RuleDefinition, audit_spec
from ..dom.models import HTMLDocument
from ..model import Finding, Severity
from ..utils.suggestions import LABEL_PLACEHOLDER, SYNTHETIC_ID, SYNTHETIC_NAME

# Valid values of <input type>; anything else is reported as 'text'
INPUT_TYPES = frozenset({
    "button", "checkbox", "color", "date", "datetime-local", "email", "file", "hidden",
    "image", "month", "number", "password", "radio", "range", "reset", "search",
    "submit", "tel", "text", "time", "url", "week",
})


def control_type(node: ElementNode) -> str:
    """
    Returns the control type the way a browser reports it.
    """
    if node.tag == "textarea":
        return "textarea"
    if node.tag == "select":
        return "select-multiple" if node.has_attr("multiple") else "select-one"
    input_type = (node.get("type") or "").lower()
    return input_type if input_type in INPUT_TYPES else "text"


def _label_targets(doc: HTMLDocument) -> Set[str]:
    return {label.get("for") for label in doc.find_all("label") if label.has_attr("for")}


@audit_spec(codes=["MISSING_ID_NAME", "MISSING_LABEL"])
def check_form_labels(doc: HTMLDocument) -> List[Finding]:
    res = []
    labelled_ids = _label_targets(doc)

    for control in doc.find_all("input", "textarea", "select"):
        control_id = control.get("id")
        name = control.get("name")
        placeholder = control.get("placeholder") or ""
        input_type = control_type(control)

        # Empty id/name values count as missing
        if not control_id and not name:
            res.append(Finding(
                code="MISSING_ID_NAME",
                severity=Severity.ERROR,
                title="Form input missing id and name attributes",
                description="Form inputs should have unique identifiers for proper labeling and accessibility.",
                offending_markup=control.markup,
                suggestion="Add both id and name attributes to the input element.",
                fixed_markup=(
                    f'<input type="{input_type}" id="{SYNTHETIC_ID}" '
                    f'name="{SYNTHETIC_NAME}" placeholder="{placeholder}">'
                )
            ))
        elif control_id and control_id not in labelled_ids:
            res.append(Finding(
                code="MISSING_LABEL",
                severity=Severity.WARNING,
                title="Form input missing associated label",
                description="Form inputs should have associated labels for better accessibility.",
                offending_markup=control.markup,
                suggestion="Add a label element with the for attribute matching the input id.",
                fixed_markup=(
                    f'<label for="{control_id}">{LABEL_PLACEHOLDER}</label>\n'
                    f'<input type="{input_type}" id="{control_id}" name="{name or control_id}">'
                )
            ))

    return res


DEFINITION = RuleDefinition(order=2, name="form_labels", check=check_form_labels)
