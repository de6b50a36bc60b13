"""Name-Source Strategies — each derives a name or description one way.

Every ``name_from_*`` function returns a ``NameResult`` or None when
its source does not apply; none of them raise.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from accname.core.contents import (
    TraversalBudget,
    get_contents_of_child_nodes,
    get_element_contents,
)
from accname.utils.text_normalizer import attribute_value, normalize

EMPTY_ALT = "<empty>"
NOT_IMPLEMENTED = "NOT YET IMPLEMENTED"


class NameSource(str, Enum):
    """Where a name or description came from."""

    ATTRIBUTE = "attribute"
    ALT = "alt"
    CONTENTS = "contents"
    DEFAULT = "default"
    LABEL_REFERENCE = "label reference"
    LABEL_ENCAPSULATION = "label encapsulation"
    DESCENDANT = "descendant"
    SUMMARY = "summary element"
    FIELDSET_LEGEND = "fieldset/legend"
    IDREFS = "idref attribute"
    NOT_IMPLEMENTED = "not implemented"


@dataclass(frozen=True)
class NameResult:
    """A computed name or description.

    ``detail`` qualifies the source: the attribute name for ATTRIBUTE and
    IDREFS, the tag name for DESCENDANT.
    """

    text: str
    source: NameSource
    detail: Optional[str] = None

    @property
    def source_label(self) -> str:
        """Human-readable source, e.g. 'title', 'caption element'."""
        if self.source is NameSource.ATTRIBUTE:
            return self.detail or self.source.value
        if self.source is NameSource.DESCENDANT:
            return f"{self.detail} element"
        if self.source is NameSource.IDREFS:
            return f"idref-attribute {self.detail}"
        if self.source is NameSource.NOT_IMPLEMENTED:
            return ""
        return self.source.value

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.text, "source": self.source_label}


def name_from_attribute(tree, node, attribute: str) -> Optional[NameResult]:
    text = attribute_value(tree, node, attribute)
    if text:
        return NameResult(text, NameSource.ATTRIBUTE, attribute)
    return None


def name_from_alt_attribute(tree, node) -> Optional[NameResult]:
    """``alt`` text; an empty alt yields the '<empty>' sentinel."""
    alt = tree.get_attribute(node, "alt")
    if alt is None:
        return None
    return NameResult(normalize(alt) or EMPTY_ALT, NameSource.ALT)


def name_from_contents(tree, node, budget: Optional[TraversalBudget] = None) -> Optional[NameResult]:
    text = get_element_contents(tree, node, budget=budget)
    if text:
        return NameResult(text, NameSource.CONTENTS)
    return None


def name_from_default(text: str) -> Optional[NameResult]:
    return NameResult(text, NameSource.DEFAULT) if text else None


def name_from_descendant(tree, node, tag: str, budget: Optional[TraversalBudget] = None) -> Optional[NameResult]:
    """Contents of the first ``tag`` descendant, in document order."""
    descendant = tree.find_descendant(node, tag)
    if descendant is None:
        return None
    text = get_element_contents(tree, descendant, budget=budget)
    if text:
        return NameResult(text, NameSource.DESCENDANT, tag)
    return None


def name_from_label_element(tree, node, budget: Optional[TraversalBudget] = None) -> Optional[NameResult]:
    """Name from a ``<label for=id>`` reference, else an enclosing label.

    The control itself is excluded from the label's contents so that its
    own value does not leak into its name.
    """
    element_id = attribute_value(tree, node, "id")
    if element_id:
        label = tree.find_by_attribute("for", element_id)
        if label is not None:
            text = get_element_contents(tree, label, excluded=node, budget=budget)
            if text:
                return NameResult(text, NameSource.LABEL_REFERENCE)

    label = tree.closest(node, "label")
    if label is not None:
        text = get_element_contents(tree, label, excluded=node, budget=budget)
        if text:
            return NameResult(text, NameSource.LABEL_ENCAPSULATION)

    return None


def name_from_details_or_summary(tree, node, budget: Optional[TraversalBudget] = None) -> Optional[NameResult]:
    """Summary contents, followed by the rest of the details when open.

    Returns None when the element has no summary descendant.
    """
    summary = tree.find_descendant(node, "summary")
    if summary is None:
        return None
    text = get_element_contents(tree, summary, budget=budget)

    if tree.has_attribute(node, "open"):
        rest = get_contents_of_child_nodes(
            tree, node, lambda child: tree.tag_name(child) != "summary", budget=budget
        )
        text = " ".join(part for part in (text, rest) if part)
        return NameResult(text, NameSource.CONTENTS) if text else None

    return NameResult(text, NameSource.SUMMARY) if text else None


def name_not_implemented() -> NameResult:
    """Placeholder for embedded media, whose naming is out of scope."""
    return NameResult(NOT_IMPLEMENTED, NameSource.NOT_IMPLEMENTED)
