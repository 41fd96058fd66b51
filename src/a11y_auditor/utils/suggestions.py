# src/a11y_auditor/utils/suggestions.py
from types import MappingProxyType

# Button labels that say nothing about the action they trigger
NON_DESCRIPTIVE_BUTTON_TEXTS = frozenset({
    "click here", "click", "submit", "button", "ok", "yes", "no"
})

BETTER_BUTTON_TEXT = MappingProxyType({
    "click here": "Learn more about our services",
    "click": "View details",
    "submit": "Send message",
    "button": "Continue to next step",
    "ok": "Confirm selection",
    "yes": "Confirm action",
    "no": "Cancel action",
})

DEFAULT_BUTTON_TEXT = "Perform action"

# Placeholders used in the synthesized fix snippets
ALT_PLACEHOLDER = "Description of the image"
ARIA_LABEL_PLACEHOLDER = "Description of the action"
LABEL_PLACEHOLDER = "Field Label"
SYNTHETIC_ID = "unique-id"
SYNTHETIC_NAME = "field-name"


def get_better_button_text(text: str) -> str:
    """Returns the improved label for a non-descriptive button text."""
    return BETTER_BUTTON_TEXT.get(text, DEFAULT_BUTTON_TEXT)
