"""Embedded controls — current values of form controls that appear
inside text being aggregated for a name.

This is the one place the computation reads live state; it does so
only through ``tree.current_value`` / ``tree.selected_values``.
"""

from accname.core.roles import EMBEDDED_CONTROL_ROLES, Role, element_type, get_role
from accname.utils.text_normalizer import attribute_value, normalize

TEXTBOX_INPUT_TYPES = frozenset({"email", "password", "search", "tel", "text", "url"})
COMBOBOX_INPUT_TYPES = frozenset({"email", "search", "tel", "text", "url"})


def _input_value(tree, node) -> str:
    return normalize(tree.current_value(node))


def _range_value(tree, node) -> str:
    """aria-valuetext, then aria-valuenow, then the field value."""
    for attr in ("aria-valuetext", "aria-valuenow"):
        value = attribute_value(tree, node, attr)
        if value:
            return value
    return _input_value(tree, node)


def _is_input(tree, node, types) -> bool:
    return tree.tag_name(node) == "input" and element_type(tree, node) in types


def _textbox_value(tree, node) -> str:
    if _is_input(tree, node, TEXTBOX_INPUT_TYPES) or tree.tag_name(node) == "textarea":
        return _input_value(tree, node)
    return ""


def _combobox_value(tree, node) -> str:
    return _input_value(tree, node) if _is_input(tree, node, COMBOBOX_INPUT_TYPES) else ""


def _listbox_value(tree, node) -> str:
    if tree.tag_name(node) != "select":
        return ""
    values = [normalize(value) for value in tree.selected_values(node)]
    return " ".join(value for value in values if value)


def _slider_value(tree, node) -> str:
    return _range_value(tree, node) if _is_input(tree, node, ("range",)) else ""


def _spinbutton_value(tree, node) -> str:
    return _range_value(tree, node) if _is_input(tree, node, ("number",)) else ""


_VALUE_GETTERS = {
    Role.TEXTBOX: _textbox_value,
    Role.COMBOBOX: _combobox_value,
    Role.LISTBOX: _listbox_value,
    Role.SLIDER: _slider_value,
    Role.SPINBUTTON: _spinbutton_value,
}


def is_embedded_control(tree, node) -> bool:
    return get_role(tree, node) in EMBEDDED_CONTROL_ROLES


def get_embedded_control_value(tree, node) -> str:
    """Text value of an embedded control, chosen by its role.

    Controls whose role comes from an explicit ``role`` attribute on a
    non-form element have no native value and yield ''.
    """
    getter = _VALUE_GETTERS.get(get_role(tree, node))
    return getter(tree, node) if getter else ""
