"""Soup Tree Adapter — TreeAdapter over a BeautifulSoup document.

Markup is parsed by BeautifulSoup; this module only maps the soup onto
the adapter interface and keeps the state a static document cannot
express (live field values, selected options, generated content and
resolved styles) in explicit per-node overrides set by the host.
"""

import re
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString
from loguru import logger

from accname.dom.tree_adapter import NodeKind, TreeAdapter
from accname.utils.text_normalizer import normalize

_STYLE_DECLARATION = re.compile(r"\s*([-\w]+)\s*:\s*([^;]+?)\s*(?:;|$)")


class SoupTreeAdapter(TreeAdapter):
    """Expose a parsed HTML document to the name/role computation."""

    def __init__(self, source: Union[str, BeautifulSoup], parser: str = "html.parser"):
        """Wrap a document.

        Args:
            source: HTML text or an already parsed BeautifulSoup object
            parser: BeautifulSoup tree builder used when ``source`` is text
        """
        if isinstance(source, BeautifulSoup):
            self.soup = source
        else:
            # Keep class/rel/headers as plain strings like every other attribute
            self.soup = BeautifulSoup(source, parser, multi_valued_attributes=None)

        # id(node) → (node, value); the node is kept to pin its identity
        self._values: Dict[int, tuple] = {}
        self._selected: Dict[int, tuple] = {}
        self._pseudo: Dict[int, tuple] = {}
        self._styles: Dict[int, tuple] = {}

    # ── Structure ────────────────────────────────────────────────────────

    @property
    def document(self) -> BeautifulSoup:
        return self.soup

    def kind(self, node) -> NodeKind:
        if isinstance(node, BeautifulSoup):
            return NodeKind.DOCUMENT
        if isinstance(node, Tag):
            return NodeKind.ELEMENT
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            return NodeKind.TEXT
        return NodeKind.OTHER

    def tag_name(self, node) -> str:
        if self.kind(node) is not NodeKind.ELEMENT:
            return ""
        return node.name.lower()

    def children(self, node) -> List[Any]:
        if not isinstance(node, Tag):
            return []
        return list(node.children)

    def parent(self, node) -> Optional[Any]:
        return node.parent

    def text(self, node) -> str:
        return str(node) if self.kind(node) is NodeKind.TEXT else ""

    # ── Attributes ───────────────────────────────────────────────────────

    def get_attribute(self, node, name: str) -> Optional[str]:
        if self.kind(node) is not NodeKind.ELEMENT:
            return None
        value = node.attrs.get(name.lower())
        if value is None:
            return None
        # Soups built by the caller may still carry multi-valued attributes
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    # ── Queries ──────────────────────────────────────────────────────────

    def find_descendant(self, node, tag: str) -> Optional[Any]:
        if not isinstance(node, Tag):
            return None
        return node.find(tag)

    def get_element_by_id(self, element_id: str) -> Optional[Any]:
        if not element_id:
            return None
        return self.soup.find(attrs={"id": element_id})

    def find_by_attribute(self, name: str, value: str) -> Optional[Any]:
        if not value:
            return None
        return self.soup.find(attrs={name: value})

    # ── Live state ───────────────────────────────────────────────────────

    def set_value(self, node: Tag, value: str) -> None:
        """Record the live value of a form field."""
        self._values[id(node)] = (node, value)

    def set_selected(self, node: Tag, options: List[Tag]) -> None:
        """Record which options of a select element are selected."""
        self._selected[id(node)] = (node, list(options))

    def set_pseudo_content(self, node: Tag, before: Optional[str] = None, after: Optional[str] = None) -> None:
        """Record computed ``content`` values for the node's pseudo-elements."""
        self._pseudo[id(node)] = (node, {"before": before, "after": after})

    def set_style(self, node: Tag, **props: str) -> None:
        """Record resolved style values (``display``, ``visibility``…)."""
        _, current = self._styles.get(id(node), (node, {}))
        current.update({k.replace("_", "-"): v for k, v in props.items()})
        self._styles[id(node)] = (node, current)

    def current_value(self, node) -> str:
        override = self._values.get(id(node))
        if override is not None:
            return override[1]
        if self.kind(node) is not NodeKind.ELEMENT:
            return ""
        tag = self.tag_name(node)
        if tag == "textarea":
            return node.get_text()
        if tag == "option":
            value = self.get_attribute(node, "value")
            # An option without a value attribute takes its text
            return value if value is not None else normalize(node.get_text())
        return self.get_attribute(node, "value") or ""

    def selected_values(self, node) -> List[str]:
        return [self.current_value(option) for option in self._selected_options(node)]

    def _selected_options(self, node) -> List[Tag]:
        override = self._selected.get(id(node))
        if override is not None:
            return override[1]
        options = node.find_all("option")
        selected = [option for option in options if option.has_attr("selected")]
        if selected:
            return selected if node.has_attr("multiple") else selected[-1:]
        # A single-select shows its first enabled option
        if not node.has_attr("multiple"):
            for option in options:
                if not option.has_attr("disabled"):
                    return [option]
        return []

    def pseudo_content(self, node, pseudo: str) -> str:
        override = self._pseudo.get(id(node))
        if override is None:
            return "none"
        value = override[1].get(pseudo)
        return "none" if value is None else value

    def computed_style(self, node, prop: str) -> Optional[str]:
        override = self._styles.get(id(node))
        if override is not None and prop in override[1]:
            return override[1][prop]
        style = self.get_attribute(node, "style")
        if not style:
            return None
        for match in _STYLE_DECLARATION.finditer(style):
            if match.group(1).lower() == prop:
                return match.group(2).strip().lower()
        return None

    def __repr__(self) -> str:
        return f"SoupTreeAdapter(elements={len(self.soup.find_all(True))})"


def tree_from_html(html: str, parser: str = "html.parser") -> SoupTreeAdapter:
    """Parse ``html`` and return an adapter over it."""
    logger.debug(f"[SoupTreeAdapter] Parsing {len(html)} chars with {parser}")
    return SoupTreeAdapter(html, parser=parser)
