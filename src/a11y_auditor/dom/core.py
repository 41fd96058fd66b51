# src/a11y_auditor/dom/core.py
from types import MappingProxyType
from typing import Iterator, List, Callable, Mapping, Optional, Tuple, Set, TYPE_CHECKING
from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from ..model import Finding
    from .models import HTMLDocument


def audit_spec(codes: List[str]):
    """
    Decorator to declare which issue codes a specific rule check returns.
    Facilitates auto-discovery by the RuleRegistry.
    """
    def decorator(func):
        func.defined_codes = codes
        return func
    return decorator


class ElementNode(BaseModel):
    """
    Immutable data model representing one element of the parsed markup tree.

    Attributes are stored as (name, value) pairs in source order: names lower-cased by
    the parser, values kept verbatim. Nothing on the node can be changed after parsing.
    `markup` and `inner_markup` are the serialized forms of the node (outer / inner HTML).
    """
    model_config = ConfigDict(frozen=True)

    tag: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    raw_text: str = ""
    markup: str = ""
    inner_markup: str = ""
    children: Tuple['ElementNode', ...] = ()

    @property
    def attrs(self) -> Mapping[str, str]:
        """Read-only name -> value view of the attributes."""
        return MappingProxyType(dict(self.attributes))

    @property
    def text_content(self) -> str:
        """Concatenated descendant text, trimmed on read."""
        return self.raw_text.strip()

    def has_attr(self, name: str) -> bool:
        wanted = name.lower()
        return any(key == wanted for key, _ in self.attributes)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.attributes:
            if key == wanted:
                return value
        return default

    def iter(self) -> Iterator['ElementNode']:
        """Pre-order walk over this node and all of its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            # Reverse so the first child is visited first
            stack.extend(reversed(node.children))


ElementNode.model_rebuild()


# Signature of a rule check: document in, ordered findings out
RuleCheck = Callable[['HTMLDocument'], List['Finding']]


class RuleDefinition:
    """
    Configuration object binding a rule check to its execution slot and issue codes.
    """

    def __init__(
            self,
            order: int,
            name: str,
            check: RuleCheck,
            possible_codes: Optional[List[str]] = None
    ):
        self.order = order
        self.name = name
        self.check = check

        # --- Auto-Discovery of Issue Codes ---
        final_codes: Set[str] = set(possible_codes or [])

        if hasattr(check, 'defined_codes'):
            final_codes.update(check.defined_codes)

        self.codes = sorted(list(final_codes))
