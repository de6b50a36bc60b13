"""Grouping labels — fieldset/legend text around a form control."""

from typing import List, Optional

from accname.core.contents import TraversalBudget, get_element_contents
from accname.core.name_sources import NameResult, NameSource
from accname.core.roles import element_type

LABELABLE_TAGS = frozenset({"button", "keygen", "meter", "output", "progress", "select", "textarea"})


def is_labelable(tree, node) -> bool:
    """HTML labelable elements: every input except hidden, plus the
    form controls in LABELABLE_TAGS."""
    tag = tree.tag_name(node)
    if tag == "input":
        return element_type(tree, node) != "hidden"
    return tag in LABELABLE_TAGS


def get_fieldset_legend_labels(tree, node, budget: Optional[TraversalBudget] = None) -> List[NameResult]:
    """Legend contents of every enclosing fieldset, innermost first."""
    budget = budget or TraversalBudget.from_settings()
    labels: List[NameResult] = []

    fieldset = tree.closest(node, "fieldset")
    while fieldset is not None:
        legend = tree.find_descendant(fieldset, "legend")
        if legend is not None:
            text = get_element_contents(tree, legend, budget=budget)
            if text:
                labels.append(NameResult(text, NameSource.FIELDSET_LEGEND))
        parent = tree.parent(fieldset)
        fieldset = tree.closest(parent, "fieldset") if parent is not None else None

    return labels


def get_grouping_labels(tree, node, budget: Optional[TraversalBudget] = None) -> List[NameResult]:
    """Grouping labels for labelable elements; [] for anything else."""
    if not is_labelable(tree, node):
        return []
    return get_fieldset_legend_labels(tree, node, budget)
