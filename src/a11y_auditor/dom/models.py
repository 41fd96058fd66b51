# src/a11y_auditor/dom/models.py
from typing import Iterator, List
from pydantic import BaseModel, ConfigDict
from .core import ElementNode


class HTMLDocument(BaseModel):
    """
    Represents a parsed markup document.

    The root is a synthetic '#document' node holding every top-level element, so
    partial fragments and full documents are walked the same way. Rule checks only
    read from it.
    """
    model_config = ConfigDict(frozen=True)

    source: str
    root: ElementNode

    def iter_elements(self) -> Iterator[ElementNode]:
        """Yields every real element in document (pre-order) order."""
        for node in self.root.iter():
            if node is not self.root:
                yield node

    def find_all(self, *tags: str) -> List[ElementNode]:
        wanted = {t.lower() for t in tags}
        return [node for node in self.iter_elements() if node.tag in wanted]
