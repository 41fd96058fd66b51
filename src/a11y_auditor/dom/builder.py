# src/a11y_auditor/dom/builder.py
import logging
from typing import Dict, List, Tuple

from bs4 import BeautifulSoup, Tag

from .models import HTMLDocument
from .core import ElementNode

logger = logging.getLogger(__name__)


class TreeAcquisitionError(Exception):
    """Raised when the markup source cannot be turned into an element tree."""


class DOMBuilder:
    """
    Builder responsible for parsing raw markup into an immutable HTMLDocument model.

    Uses BeautifulSoup with the 'html5lib' backend, which follows the HTML5 parsing
    algorithm: malformed markup is repaired the way a browser repairs it, never
    reported as an error. Fragments get the implied html/head/body wrappers.
    """

    PARSER = "html5lib"

    def parse_doc(self, html: str) -> HTMLDocument:
        """
        Parses raw markup into an HTMLDocument.

        Args:
            html (str): The raw markup string (full document or fragment).

        Returns:
            HTMLDocument: The immutable element tree rooted at a '#document' node.

        Raises:
            TreeAcquisitionError: If the parser or the tree construction fails.
        """
        # Basic cleanup of potentially dirty input (e.g., BOM)
        clean_html = html.replace('\ufeff', '')

        try:
            # Keep 'class' and friends as the verbatim attribute string
            soup = BeautifulSoup(clean_html, self.PARSER, multi_valued_attributes=None)
            children = tuple(self._build_tree(child) for child in soup.children if isinstance(child, Tag))
        except Exception as e:
            raise TreeAcquisitionError(f"Could not parse markup: {e}") from e

        root = ElementNode(
            tag="#document",
            raw_text=soup.get_text(),
            markup=clean_html,
            inner_markup=clean_html,
            children=children
        )
        logger.debug("Built element tree with %d top-level element(s)", len(children))
        return HTMLDocument(source=html, root=root)

    def _build_tree(self, top: Tag) -> ElementNode:
        """
        Converts a BeautifulSoup Tag and its descendants into ElementNodes.

        Tags are collected in pre-order with an explicit stack, then built in reverse
        so every child node exists before its parent. Nesting depth is unbounded.
        """
        ordered: List[Tag] = []
        stack = [top]
        while stack:
            tag = stack.pop()
            ordered.append(tag)
            stack.extend(reversed([child for child in tag.children if isinstance(child, Tag)]))

        built: Dict[int, ElementNode] = {}
        for tag in reversed(ordered):
            built[id(tag)] = ElementNode(
                tag=tag.name.lower(),
                attributes=self._normalize_attrs(tag.attrs),
                raw_text=tag.get_text(),
                markup=tag.decode(),
                inner_markup=tag.decode_contents(),
                children=tuple(built.pop(id(child)) for child in tag.children if isinstance(child, Tag))
            )

        return built[id(top)]

    @staticmethod
    def _normalize_attrs(attrs: Dict) -> Tuple[Tuple[str, str], ...]:
        normalized = []
        for name, value in attrs.items():
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            normalized.append((name.lower(), "" if value is None else str(value)))
        return tuple(normalized)
