"""Role Resolver — maps an element to its ARIA role.

An explicit ``role`` attribute always wins; otherwise the implicit role
comes from the tag (and, for ``input``/``menuitem``, the type) per ARIA
in HTML, with a handful of contextual exceptions.

References:
    ARIA in HTML (21 October 2015), WAI-ARIA 1.1
"""

from enum import Enum
from typing import Callable, Dict, Optional

from accname.dom.tree_adapter import NodeKind
from accname.utils.text_normalizer import attribute_value


class Role(str, Enum):
    """Concrete WAI-ARIA 1.1 roles."""

    # Landmark
    APPLICATION = "application"
    BANNER = "banner"
    COMPLEMENTARY = "complementary"
    CONTENTINFO = "contentinfo"
    FORM = "form"
    MAIN = "main"
    NAVIGATION = "navigation"
    SEARCH = "search"

    # Widget
    ALERT = "alert"
    ALERTDIALOG = "alertdialog"
    BUTTON = "button"
    CHECKBOX = "checkbox"
    DIALOG = "dialog"
    GRIDCELL = "gridcell"
    LINK = "link"
    LOG = "log"
    MARQUEE = "marquee"
    MENUITEM = "menuitem"
    MENUITEMCHECKBOX = "menuitemcheckbox"
    MENUITEMRADIO = "menuitemradio"
    OPTION = "option"
    PROGRESSBAR = "progressbar"
    RADIO = "radio"
    SCROLLBAR = "scrollbar"
    SEARCHBOX = "searchbox"
    SLIDER = "slider"
    SPINBUTTON = "spinbutton"
    STATUS = "status"
    SWITCH = "switch"
    TAB = "tab"
    TABPANEL = "tabpanel"
    TEXTBOX = "textbox"
    TIMER = "timer"
    TOOLTIP = "tooltip"
    TREEITEM = "treeitem"

    # Composite widget
    COMBOBOX = "combobox"
    GRID = "grid"
    LISTBOX = "listbox"
    MENU = "menu"
    MENUBAR = "menubar"
    RADIOGROUP = "radiogroup"
    TABLIST = "tablist"
    TREE = "tree"
    TREEGRID = "treegrid"

    # Document structure
    ARTICLE = "article"
    CELL = "cell"
    COLUMNHEADER = "columnheader"
    DEFINITION = "definition"
    DIRECTORY = "directory"
    DOCUMENT = "document"
    GROUP = "group"
    HEADING = "heading"
    IMG = "img"
    LIST = "list"
    LISTITEM = "listitem"
    MATH = "math"
    NONE = "none"
    NOTE = "note"
    PRESENTATION = "presentation"
    REGION = "region"
    ROW = "row"
    ROWGROUP = "rowgroup"
    ROWHEADER = "rowheader"
    SEPARATOR = "separator"
    TABLE = "table"
    TEXT = "text"
    TOOLBAR = "toolbar"


_VALID_ROLES: Dict[str, Role] = {role.value: role for role in Role}

# Roles whose accessible name may be computed from the element's contents
NAME_FROM_CONTENTS_ROLES = frozenset({
    Role.BUTTON, Role.CELL, Role.CHECKBOX, Role.COLUMNHEADER, Role.DIRECTORY,
    Role.GRIDCELL, Role.HEADING, Role.LINK, Role.LISTITEM, Role.MENUITEM,
    Role.MENUITEMCHECKBOX, Role.MENUITEMRADIO, Role.OPTION, Role.RADIO,
    Role.ROW, Role.ROWGROUP, Role.ROWHEADER, Role.SWITCH, Role.TAB,
    Role.TEXT, Role.TOOLTIP, Role.TREEITEM,
})

# Form-control roles that contribute their current value to a name
EMBEDDED_CONTROL_ROLES = frozenset({
    Role.TEXTBOX, Role.COMBOBOX, Role.LISTBOX, Role.SLIDER, Role.SPINBUTTON,
})

NON_SEMANTIC_ROLES = frozenset({Role.PRESENTATION, Role.NONE})


# ── Implicit role tables ─────────────────────────────────────────────────────

TAG_ROLES: Dict[str, Role] = {
    "article": Role.ARTICLE,
    "aside": Role.COMPLEMENTARY,
    "body": Role.DOCUMENT,
    "button": Role.BUTTON,
    "datalist": Role.LISTBOX,
    "details": Role.GROUP,
    "dialog": Role.DIALOG,
    "dl": Role.LIST,
    "fieldset": Role.GROUP,
    "form": Role.FORM,
    "h1": Role.HEADING,
    "h2": Role.HEADING,
    "h3": Role.HEADING,
    "h4": Role.HEADING,
    "h5": Role.HEADING,
    "h6": Role.HEADING,
    "hr": Role.SEPARATOR,
    "main": Role.MAIN,
    "meter": Role.PROGRESSBAR,
    "nav": Role.NAVIGATION,
    "ol": Role.LIST,
    "output": Role.STATUS,
    "progress": Role.PROGRESSBAR,
    "section": Role.REGION,
    "select": Role.LISTBOX,
    "summary": Role.BUTTON,
    "tbody": Role.ROWGROUP,
    "textarea": Role.TEXTBOX,
    "tfoot": Role.ROWGROUP,
    "th": Role.COLUMNHEADER,
    "thead": Role.ROWGROUP,
    "ul": Role.LIST,
}

# input types whose role turns into combobox when a `list` attribute is set
TEXT_INPUT_TYPES = frozenset({"email", "search", "tel", "text", "url"})

INPUT_TYPE_ROLES: Dict[str, Role] = {
    "button": Role.BUTTON,
    "checkbox": Role.CHECKBOX,
    "email": Role.TEXTBOX,
    "image": Role.BUTTON,
    "number": Role.SPINBUTTON,
    "password": Role.TEXTBOX,
    "radio": Role.RADIO,
    "range": Role.SLIDER,
    "reset": Role.BUTTON,
    "search": Role.TEXTBOX,
    "submit": Role.BUTTON,
    "tel": Role.TEXTBOX,
    "text": Role.TEXTBOX,
    "url": Role.TEXTBOX,
}

MENUITEM_TYPE_ROLES: Dict[str, Role] = {
    "command": Role.MENUITEM,
    "checkbox": Role.MENUITEMCHECKBOX,
    "radio": Role.MENUITEMRADIO,
}

_DEFAULT_TYPES = {"input": "text", "menuitem": "command"}


def element_type(tree, node) -> str:
    """Lower-cased ``type`` of an element, with the HTML defaults for
    ``input`` (text) and ``menuitem`` (command) when it is missing."""
    value = attribute_value(tree, node, "type").lower()
    if value:
        return value
    return _DEFAULT_TYPES.get(tree.tag_name(node), "")


# ── Contextual rules ─────────────────────────────────────────────────────────

def is_descendant_of(tree, node, tag_names) -> bool:
    return any(tree.closest(node, name) is not None for name in tag_names)


def has_parent_with_name(tree, node, tag_names) -> bool:
    parent = tree.parent_element(node)
    return parent is not None and tree.tag_name(parent) in tag_names


def in_list_of_options(tree, node) -> bool:
    """True if the option is a child of select, of an optgroup inside a
    select, or of a datalist."""
    parent = tree.parent_element(node)
    if parent is None:
        return False
    parent_name = tree.tag_name(parent)
    if parent_name in ("select", "datalist"):
        return True
    if parent_name == "optgroup":
        return has_parent_with_name(tree, parent, ("select",))
    return False


def _link_role(tree, node) -> Optional[Role]:
    return Role.LINK if tree.has_attribute(node, "href") else None


def _sectioning_exempt(role: Role) -> Callable:
    def resolve(tree, node) -> Optional[Role]:
        return None if is_descendant_of(tree, node, ("article", "section")) else role
    return resolve


def _img_role(tree, node) -> Optional[Role]:
    return None if has_empty_alt_text(tree, node) else Role.IMG


def _input_role(tree, node) -> Optional[Role]:
    input_type = element_type(tree, node)
    if input_type in TEXT_INPUT_TYPES and tree.has_attribute(node, "list"):
        return Role.COMBOBOX
    return INPUT_TYPE_ROLES.get(input_type)


def _li_role(tree, node) -> Optional[Role]:
    return Role.LISTITEM if has_parent_with_name(tree, node, ("ol", "ul")) else None


def _menu_role(tree, node) -> Optional[Role]:
    return Role.TOOLBAR if element_type(tree, node) == "toolbar" else None


def _menuitem_role(tree, node) -> Optional[Role]:
    return MENUITEM_TYPE_ROLES.get(element_type(tree, node))


def _option_role(tree, node) -> Optional[Role]:
    return Role.OPTION if in_list_of_options(tree, node) else None


CONTEXTUAL_ROLES: Dict[str, Callable] = {
    "a": _link_role,
    "area": _link_role,
    "link": _link_role,
    "footer": _sectioning_exempt(Role.CONTENTINFO),
    "header": _sectioning_exempt(Role.BANNER),
    "img": _img_role,
    "input": _input_role,
    "li": _li_role,
    "menu": _menu_role,
    "menuitem": _menuitem_role,
    "option": _option_role,
}


def has_empty_alt_text(tree, node) -> bool:
    """True if ``alt`` is present and normalizes to the empty string."""
    return tree.has_attribute(node, "alt") and not attribute_value(tree, node, "alt")


# ── Resolution ───────────────────────────────────────────────────────────────

def get_valid_role(value: str) -> Optional[Role]:
    """First whitespace-separated token of ``value`` that names a role."""
    for token in value.split():
        role = _VALID_ROLES.get(token.lower())
        if role is not None:
            return role
    return None


def get_explicit_role(tree, node) -> Optional[Role]:
    """Role declared by the ``role`` attribute, if any token is valid."""
    if not tree.has_attribute(node, "role"):
        return None
    return get_valid_role(attribute_value(tree, node, "role"))


def get_implicit_role(tree, node) -> Role:
    """Role implied by the element's tag and context."""
    tag = tree.tag_name(node)
    resolver = CONTEXTUAL_ROLES.get(tag)
    if resolver is not None:
        return resolver(tree, node) or Role.NONE
    return TAG_ROLES.get(tag, Role.NONE)


def get_role(tree, node) -> Role:
    """ARIA role of ``node``; ``Role.NONE`` when it has none.

    A ``role`` attribute with no valid token yields ``Role.NONE``
    rather than falling back to the implicit role.
    """
    if tree.kind(node) is not NodeKind.ELEMENT:
        return Role.NONE
    if tree.has_attribute(node, "role"):
        return get_explicit_role(tree, node) or Role.NONE
    return get_implicit_role(tree, node)
