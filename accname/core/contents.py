"""Content Aggregator — flattened text equivalent of a subtree.

Text nodes contribute their normalized text, elements that can carry
``alt`` contribute it, embedded controls contribute their current
value, and everything else recurses into its children. CSS-generated
``::before``/``::after`` content wraps every element's result.

Recursion is bounded by a ``TraversalBudget`` shared with the name
computation, so deep trees and reference cycles end in empty text
instead of a stack overflow.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional

from loguru import logger

from accname.config import Settings, load_config
from accname.core.embedded import get_embedded_control_value, is_embedded_control
from accname.core.roles import element_type
from accname.dom.tree_adapter import NodeKind
from accname.utils.text_normalizer import attribute_value, normalize


@dataclass
class TraversalBudget:
    """Recursion guard threaded through one top-level computation."""

    max_depth: int = 256
    max_reference_depth: int = 8
    depth: int = 0
    references: List[Any] = field(default_factory=list)
    truncated: bool = False

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TraversalBudget":
        settings = settings or load_config()
        return cls(
            max_depth=settings.max_tree_depth,
            max_reference_depth=settings.max_reference_depth,
        )

    @contextmanager
    def descend(self) -> Iterator[bool]:
        """Enter one tree level; yields False once the depth budget is spent."""
        if self.depth >= self.max_depth:
            self._mark_truncated(f"tree depth limit {self.max_depth} reached")
            yield False
            return
        self.depth += 1
        try:
            yield True
        finally:
            self.depth -= 1

    @contextmanager
    def follow(self, node) -> Iterator[bool]:
        """Enter an ID-reference target; yields False for a target already
        on the active reference chain or past the chain length limit."""
        if any(node is seen for seen in self.references):
            logger.debug("[Contents] Skipping ID reference back into the active chain")
            yield False
            return
        if len(self.references) >= self.max_reference_depth:
            self._mark_truncated(f"reference depth limit {self.max_reference_depth} reached")
            yield False
            return
        self.references.append(node)
        try:
            yield True
        finally:
            self.references.pop()

    def _mark_truncated(self, reason: str) -> None:
        if not self.truncated:
            logger.warning(f"[Contents] Computation truncated: {reason}")
        self.truncated = True


def could_have_alt_text(tree, node) -> bool:
    """img, area and image inputs take their text from ``alt``."""
    tag = tree.tag_name(node)
    if tag in ("img", "area"):
        return True
    return tag == "input" and element_type(tree, node) == "image"


def add_css_generated_content(tree, node, contents: str) -> str:
    """Wrap ``contents`` in the node's ::before/::after content, skipping
    the computed default 'none'."""
    prefix = tree.pseudo_content(node, "before")
    suffix = tree.pseudo_content(node, "after")
    if prefix is not None and prefix != "none":
        contents = prefix + contents
    if suffix is not None and suffix != "none":
        contents = contents + suffix
    return contents


def get_node_contents(tree, node, excluded=None, budget: Optional[TraversalBudget] = None) -> str:
    """Text contributed by ``node`` (and its subtree) to an aggregate.

    Args:
        tree: TreeAdapter for the document
        node: Element, text or other node
        excluded: Node that contributes nothing (a label's own control)
        budget: Recursion guard; a fresh one is created when omitted

    Returns:
        Normalized text, possibly empty
    """
    if node is excluded:
        return ""

    budget = budget or TraversalBudget.from_settings()
    kind = tree.kind(node)

    if kind is NodeKind.TEXT:
        return normalize(tree.text(node))
    if kind is not NodeKind.ELEMENT:
        return ""

    with budget.descend() as allowed:
        if not allowed:
            return ""
        if could_have_alt_text(tree, node):
            contents = attribute_value(tree, node, "alt")
        elif is_embedded_control(tree, node):
            contents = get_embedded_control_value(tree, node)
        else:
            contents = _join_children(tree, node, excluded, budget)
        return add_css_generated_content(tree, node, contents)


def get_element_contents(tree, node, excluded=None, budget: Optional[TraversalBudget] = None) -> str:
    """Text equivalent of ``node``'s children plus its own generated content.

    Unlike ``get_node_contents`` the node itself is never treated as an
    alt-text carrier or an embedded control.
    """
    budget = budget or TraversalBudget.from_settings()
    with budget.descend() as allowed:
        if not allowed:
            return ""
        contents = _join_children(tree, node, excluded, budget)
        return add_css_generated_content(tree, node, contents)


def get_contents_of_child_nodes(
    tree,
    node,
    predicate: Callable[[Any], bool],
    budget: Optional[TraversalBudget] = None,
) -> str:
    """Text of the child text nodes and of the child elements accepted by
    ``predicate``, joined by single spaces."""
    budget = budget or TraversalBudget.from_settings()
    parts = []
    for child in tree.children(node):
        kind = tree.kind(child)
        if kind is NodeKind.ELEMENT:
            if predicate(child):
                parts.append(get_element_contents(tree, child, budget=budget))
        elif kind is NodeKind.TEXT:
            parts.append(normalize(tree.text(child)))
    return " ".join(part for part in parts if part)


def _join_children(tree, node, excluded, budget: TraversalBudget) -> str:
    # Two stack frames per tree level: this one and get_node_contents
    parts = []
    for child in tree.children(node):
        part = get_node_contents(tree, child, excluded, budget)
        if part:
            parts.append(part)
    return " ".join(parts)
