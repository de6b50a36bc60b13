"""Tree helpers used by callers that pick which elements to describe."""

from typing import Iterable

from accname.core.roles import has_parent_with_name, is_descendant_of
from accname.dom.tree_adapter import NodeKind

__all__ = [
    "count_children_with_tag_names",
    "has_parent_with_name",
    "is_descendant_of",
    "is_visible",
]


def is_visible(tree, node) -> bool:
    """False if the node or any ancestor is display:none, visibility:hidden,
    ``hidden`` or ``aria-hidden="true"``."""
    current = node
    while current is not None and tree.kind(current) is not NodeKind.DOCUMENT:
        if tree.kind(current) is NodeKind.ELEMENT:
            if tree.computed_style(current, "display") == "none":
                return False
            if tree.computed_style(current, "visibility") == "hidden":
                return False
            if tree.has_attribute(current, "hidden"):
                return False
            if tree.get_attribute(current, "aria-hidden") == "true":
                return False
        current = tree.parent(current)
    return True


def count_children_with_tag_names(tree, node, tag_names: Iterable[str]) -> int:
    names = set(tag_names)
    return sum(
        1
        for child in tree.children(node)
        if tree.kind(child) is NodeKind.ELEMENT and tree.tag_name(child) in names
    )
