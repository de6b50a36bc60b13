"""Accessibility Extractor — describe the elements of a whole document.

Walks a tree depth-first, describes every element that matches the
requested roles or tags, and formats the results as a compact numbered
listing.
"""

from typing import Iterable, Iterator, List, Optional

from loguru import logger

from accname.config import Settings, load_config
from accname.core.descriptor import Descriptor, describe
from accname.core.roles import Role, get_role
from accname.core.visibility import is_visible
from accname.dom.tree_adapter import NodeKind

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


class AccessibilityExtractor:
    """Collect Descriptors for the interesting elements of a document."""

    INTERACTIVE_ROLES = frozenset({
        Role.BUTTON, Role.LINK, Role.TEXTBOX, Role.COMBOBOX, Role.CHECKBOX,
        Role.RADIO, Role.LISTBOX, Role.OPTION, Role.MENUITEM, Role.TAB,
        Role.SEARCHBOX, Role.SLIDER, Role.SPINBUTTON, Role.SWITCH,
    })

    def __init__(self, tree, settings: Optional[Settings] = None):
        self.tree = tree
        self.settings = settings or load_config()

    def _elements(self, node) -> Iterator:
        """Descendant elements of ``node`` in document order."""
        stack = list(reversed(self.tree.children(node)))
        while stack:
            child = stack.pop()
            if self.tree.kind(child) is NodeKind.ELEMENT:
                yield child
                stack.extend(reversed(self.tree.children(child)))

    def _matches(self, node, roles, tags) -> bool:
        if tags and self.tree.tag_name(node) in tags:
            return True
        return get_role(self.tree, node) in roles

    def get_elements(
        self,
        roles: Optional[Iterable[Role]] = None,
        tags: Optional[Iterable[str]] = None,
        title: Optional[str] = None,
    ) -> List[Descriptor]:
        """Describe every matching element in document order.

        Args:
            roles: Roles to collect (default: INTERACTIVE_ROLES); pass an
                empty iterable to select by tag only
            tags: Tag names to collect regardless of role
            title: Heading copied onto each Descriptor

        Returns:
            List of Descriptors; headings carry 'level N' props
        """
        roles = self.INTERACTIVE_ROLES if roles is None else frozenset(roles)
        tags = frozenset(tags or ())
        include_hidden = self.settings.include_hidden

        descriptors: List[Descriptor] = []
        for node in self._elements(self.tree.document):
            if not self._matches(node, roles, tags):
                continue
            if not include_hidden and not is_visible(self.tree, node):
                continue
            info = describe(self.tree, node, title=title, settings=self.settings)
            tag = self.tree.tag_name(node)
            if tag in HEADING_TAGS:
                info.add_props(f"level {tag[1:]}")
            descriptors.append(info)

        logger.debug(f"[AccessibilityExtractor] Described {len(descriptors)} elements")
        return descriptors

    def get_unnamed_elements(self, **kwargs) -> List[Descriptor]:
        """Matching elements whose accessible name is absent."""
        return [info for info in self.get_elements(**kwargs) if info.name is None]

    def get_labeled_dom(self, **kwargs) -> str:
        """Return a compact numbered listing.

        Format:
            [0] button: "Search"
            [1] textbox: "Query" - Enter search terms
            [2] link (no name)

        Returns:
            Multi-line string, one element per line.
        """
        lines = []
        for i, info in enumerate(self.get_elements(**kwargs)):
            role = info.role.value
            if info.name is None:
                line = f"[{i}] {role} (no name)"
            else:
                line = f'[{i}] {role}: "{info.name.text}"'
            if info.description is not None:
                line += f" - {info.description.text}"
            lines.append(line)
        return "\n".join(lines)

    def get_element_count(self, **kwargs) -> int:
        """Return the number of matching elements in the document."""
        return len(self.get_elements(**kwargs))
