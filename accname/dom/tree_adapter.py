"""Tree Adapter — the host-facing view of a document tree.

The name/role computation never touches a concrete DOM. Everything it
needs (structure, attributes, the live state of form controls and
CSS-generated content) goes through an adapter, so the algorithm runs
the same against a parsed document, a browser snapshot or an in-memory
test fixture.

Nodes are whatever objects the host uses; the core only compares them
by identity and hands them back to the adapter.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Optional


class NodeKind(str, Enum):
    """Kinds of node the computation distinguishes."""

    ELEMENT = "element"
    TEXT = "text"
    DOCUMENT = "document"
    OTHER = "other"  # comments, doctypes, processing instructions


class TreeAdapter(ABC):
    """Read-only access to a document snapshot."""

    # ── Structure ────────────────────────────────────────────────────────

    @property
    @abstractmethod
    def document(self) -> Any:
        """The document (root) node."""
        ...

    @abstractmethod
    def kind(self, node) -> NodeKind:
        ...

    @abstractmethod
    def tag_name(self, node) -> str:
        """Lower-cased tag name; '' for non-element nodes."""
        ...

    @abstractmethod
    def children(self, node) -> List[Any]:
        """Child nodes in document order (elements, text and others)."""
        ...

    @abstractmethod
    def parent(self, node) -> Optional[Any]:
        """Parent node, or None at the document root."""
        ...

    @abstractmethod
    def text(self, node) -> str:
        """Raw character data of a text node."""
        ...

    # ── Attributes ───────────────────────────────────────────────────────

    @abstractmethod
    def get_attribute(self, node, name: str) -> Optional[str]:
        """Attribute value, or None when the attribute is absent.

        An attribute present with an empty value returns ''.
        """
        ...

    def has_attribute(self, node, name: str) -> bool:
        return self.get_attribute(node, name) is not None

    # ── Queries ──────────────────────────────────────────────────────────

    def parent_element(self, node) -> Optional[Any]:
        parent = self.parent(node)
        if parent is not None and self.kind(parent) is NodeKind.ELEMENT:
            return parent
        return None

    def closest(self, node, tag: str) -> Optional[Any]:
        """Nearest inclusive ancestor element with the given tag name."""
        current = node
        while current is not None:
            if self.kind(current) is NodeKind.ELEMENT and self.tag_name(current) == tag:
                return current
            current = self.parent(current)
        return None

    def find_descendant(self, node, tag: str) -> Optional[Any]:
        """First descendant element (document order) with the given tag name."""
        stack = list(reversed(self.children(node)))
        while stack:
            current = stack.pop()
            if self.kind(current) is not NodeKind.ELEMENT:
                continue
            if self.tag_name(current) == tag:
                return current
            stack.extend(reversed(self.children(current)))
        return None

    @abstractmethod
    def get_element_by_id(self, element_id: str) -> Optional[Any]:
        """First element in the document whose id equals ``element_id``."""
        ...

    @abstractmethod
    def find_by_attribute(self, name: str, value: str) -> Optional[Any]:
        """First element in the document whose attribute ``name`` equals ``value``."""
        ...

    # ── Live state ───────────────────────────────────────────────────────

    @abstractmethod
    def current_value(self, node) -> str:
        """Current value of a form field (input, textarea, option)."""
        ...

    @abstractmethod
    def selected_values(self, node) -> List[str]:
        """Values of the currently selected options of a select element."""
        ...

    def pseudo_content(self, node, pseudo: str) -> str:
        """Computed ``content`` of the ``before``/``after`` pseudo-element.

        Returns 'none' when there is no generated content.
        """
        return "none"

    def computed_style(self, node, prop: str) -> Optional[str]:
        """Resolved style value for ``prop``, or None if the host has none."""
        return None
