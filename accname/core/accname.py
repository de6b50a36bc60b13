"""Accessible name and description computation.

Precedence for names:
    1. aria-labelledby (not while resolving another element's reference)
    2. aria-label
    3. the element's native semantics, ending with ``title``

Descriptions use aria-describedby, then ``title``.

References:
    HTML Accessibility API Mappings 1.0, SVG Accessibility API Mappings
"""

from typing import Callable, Dict, Optional

from loguru import logger

from accname.config import Settings
from accname.core.contents import TraversalBudget
from accname.core.name_sources import (
    NameResult,
    NameSource,
    name_from_alt_attribute,
    name_from_attribute,
    name_from_contents,
    name_from_default,
    name_from_descendant,
    name_from_details_or_summary,
    name_from_label_element,
    name_not_implemented,
)
from accname.core.roles import (
    NAME_FROM_CONTENTS_ROLES,
    NON_SEMANTIC_ROLES,
    element_type,
    get_explicit_role,
    get_role,
)
from accname.dom.tree_adapter import NodeKind
from accname.utils.text_normalizer import attribute_value

# ── Native semantics ─────────────────────────────────────────────────────────
# Each rule gets (tree, node, indirect, budget) and returns a NameResult or None.


def _text_field(tree, node, indirect, budget):
    return name_from_label_element(tree, node, budget) or name_from_attribute(tree, node, "placeholder")


def _labelled_control(tree, node, indirect, budget):
    return name_from_label_element(tree, node, budget)


def _contents(tree, node, indirect, budget):
    return name_from_contents(tree, node, budget)


def _hidden_input(tree, node, indirect, budget):
    return name_from_label_element(tree, node, budget) if indirect else None


def _button_input(tree, node, indirect, budget):
    return name_from_attribute(tree, node, "value")


def _reset_input(tree, node, indirect, budget):
    return name_from_attribute(tree, node, "value") or name_from_default("Reset")


def _submit_input(tree, node, indirect, budget):
    return name_from_attribute(tree, node, "value") or name_from_default("Submit")


def _image_input(tree, node, indirect, budget):
    return name_from_alt_attribute(tree, node) or name_from_attribute(tree, node, "value")


def _alt(tree, node, indirect, budget):
    return name_from_alt_attribute(tree, node)


def _title_attribute(tree, node, indirect, budget):
    return name_from_attribute(tree, node, "title")


def _descendant(tag: str) -> Callable:
    def rule(tree, node, indirect, budget):
        return name_from_descendant(tree, node, tag, budget)
    return rule


def _details(tree, node, indirect, budget):
    return name_from_details_or_summary(tree, node, budget)


def _media(tree, node, indirect, budget):
    if tree.has_attribute(node, "controls"):
        return name_not_implemented()
    return _generic(tree, node, indirect, budget)


def _embedded_object(tree, node, indirect, budget):
    return name_not_implemented()


def _generic(tree, node, indirect, budget):
    """Elements without a dedicated rule: contents for name-from-contents
    roles, or for any element reached through an ID reference."""
    if indirect or get_role(tree, node) in NAME_FROM_CONTENTS_ROLES:
        return name_from_contents(tree, node, budget)
    return None


INPUT_TYPE_RULES: Dict[str, Callable] = {
    "hidden": _hidden_input,
    "email": _text_field,
    "password": _text_field,
    "search": _text_field,
    "tel": _text_field,
    "text": _text_field,
    "url": _text_field,
    "button": _button_input,
    "reset": _reset_input,
    "submit": _submit_input,
    "image": _image_input,
}


def _input(tree, node, indirect, budget):
    rule = INPUT_TYPE_RULES.get(element_type(tree, node), _labelled_control)
    return rule(tree, node, indirect, budget)


TAG_RULES: Dict[str, Callable] = {
    # Form elements
    "input": _input,
    "button": _contents,
    "label": _contents,
    "keygen": _labelled_control,
    "meter": _labelled_control,
    "output": _labelled_control,
    "progress": _labelled_control,
    "select": _labelled_control,
    "textarea": _text_field,
    # Embedded elements
    "audio": _media,
    "video": _media,
    "embed": _embedded_object,
    "object": _embedded_object,
    "iframe": _title_attribute,
    "img": _alt,
    "area": _alt,
    "svg": _descendant("title"),
    # Other elements
    "a": _contents,
    "details": _details,
    "figure": _descendant("figcaption"),
    "table": _descendant("caption"),
}


def name_from_native_semantics(
    tree, node, indirect: bool = False, budget: Optional[TraversalBudget] = None
) -> Optional[NameResult]:
    """Name derived from the element's HTML semantics, with ``title`` as
    the last resort."""
    budget = budget or TraversalBudget.from_settings()
    rule = TAG_RULES.get(tree.tag_name(node), _generic)
    return rule(tree, node, indirect, budget) or name_from_attribute(tree, node, "title")


# ── ID references ────────────────────────────────────────────────────────────

def name_from_idrefs(
    tree, node, attribute: str, budget: Optional[TraversalBudget] = None
) -> Optional[NameResult]:
    """Join the names of the elements listed in an IDREFS attribute.

    Targets are visited in the order written; missing ids are skipped and
    each target's name is computed without further indirection.
    """
    budget = budget or TraversalBudget.from_settings()
    names = []
    for element_id in attribute_value(tree, node, attribute).split(" "):
        if not element_id:
            continue
        target = tree.get_element_by_id(element_id)
        if target is None:
            logger.debug(f"[AccName] {attribute} references missing id '{element_id}'")
            continue
        with budget.follow(target) as allowed:
            if not allowed:
                continue
            result = compute_name(tree, target, indirect=True, budget=budget)
        if result is not None and result.text:
            names.append(result.text)

    if names:
        return NameResult(" ".join(names), NameSource.IDREFS, attribute)
    return None


# ── Entry points ─────────────────────────────────────────────────────────────

def compute_name(
    tree,
    node,
    indirect: bool = False,
    budget: Optional[TraversalBudget] = None,
    settings: Optional[Settings] = None,
) -> Optional[NameResult]:
    """Accessible name of ``node``, or None.

    Args:
        tree: TreeAdapter for the document
        node: Element to name
        indirect: True while resolving another element's ID reference;
            suppresses aria-labelledby and lets any element name itself
            from its contents
        budget: Recursion guard shared across the whole query
        settings: Used to size a new budget when none is given

    Returns:
        NameResult or None
    """
    if tree.kind(node) is not NodeKind.ELEMENT:
        return None
    budget = budget or TraversalBudget.from_settings(settings)

    # role="presentation"/"none" removes the name, except as a reference target
    if not indirect and get_explicit_role(tree, node) in NON_SEMANTIC_ROLES:
        return None

    result = None
    if not indirect:
        result = name_from_idrefs(tree, node, "aria-labelledby", budget)
    return (
        result
        or name_from_attribute(tree, node, "aria-label")
        or name_from_native_semantics(tree, node, indirect, budget)
    )


def compute_description(
    tree,
    node,
    indirect: bool = False,
    budget: Optional[TraversalBudget] = None,
    settings: Optional[Settings] = None,
) -> Optional[NameResult]:
    """Accessible description of ``node``: aria-describedby, else ``title``."""
    if tree.kind(node) is not NodeKind.ELEMENT:
        return None
    budget = budget or TraversalBudget.from_settings(settings)

    result = None
    if not indirect:
        result = name_from_idrefs(tree, node, "aria-describedby", budget)
    return result or name_from_attribute(tree, node, "title")
