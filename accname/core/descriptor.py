"""Descriptor Assembler — role, name, description and grouping labels
for one element, as consumed by highlighting and reporting layers."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger

from accname.config import Settings
from accname.core.accname import compute_description, compute_name
from accname.core.contents import TraversalBudget
from accname.core.grouping import get_grouping_labels
from accname.core.name_sources import NameResult
from accname.core.roles import Role, get_role
from accname.dom.tree_adapter import NodeKind


@dataclass
class Descriptor:
    """Accessibility information for one element."""

    role: Role
    name: Optional[NameResult] = None
    description: Optional[NameResult] = None
    grouping_labels: List[NameResult] = field(default_factory=list)
    title: Optional[str] = None
    props: Optional[str] = None

    def add_props(self, props: str) -> None:
        self.props = props

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "role": None if self.role is Role.NONE else self.role.value,
            "name": self.name.to_dict() if self.name else None,
            "description": self.description.to_dict() if self.description else None,
            "grouping_labels": [label.to_dict() for label in self.grouping_labels],
            "props": self.props,
        }


def name_includes_description(name: Optional[NameResult], description: Optional[NameResult]) -> bool:
    """True if the description text occurs in the name, ignoring case."""
    if name is None or description is None:
        return False
    return description.text.lower() in name.text.lower()


def describe(
    tree,
    node,
    title: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Descriptor:
    """Compute the Descriptor for ``node``.

    Args:
        tree: TreeAdapter for the document
        node: Element to describe
        title: Optional heading for the consumer (e.g. 'FORM INFO')
        settings: Sizes the recursion guard

    Returns:
        Descriptor; its description is dropped when the name already
        contains it. Text and document nodes get an empty Descriptor.
    """
    if tree.kind(node) is not NodeKind.ELEMENT:
        logger.debug(f"[Descriptor] Nothing to describe on a {tree.kind(node).value} node")
        return Descriptor(role=Role.NONE, title=title)

    budget = TraversalBudget.from_settings(settings)
    name = compute_name(tree, node, budget=budget)
    description = compute_description(tree, node, budget=budget)

    if name_includes_description(name, description):
        logger.debug(f"[Descriptor] Dropping description duplicated in name: {description.text!r}")
        description = None

    return Descriptor(
        role=get_role(tree, node),
        name=name,
        description=description,
        grouping_labels=get_grouping_labels(tree, node, budget),
        title=title,
    )
