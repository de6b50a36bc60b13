"""accname — ARIA role, accessible name and accessible description
computation for HTML-like document trees."""

from accname.core.accname import compute_description, compute_name
from accname.core.descriptor import Descriptor, describe
from accname.core.grouping import get_grouping_labels, is_labelable
from accname.core.name_sources import EMPTY_ALT, NameResult, NameSource
from accname.core.roles import Role, get_role
from accname.dom.soup_adapter import SoupTreeAdapter, tree_from_html
from accname.dom.tree_adapter import NodeKind, TreeAdapter
from accname.utils.text_normalizer import normalize

__version__ = "0.3.0"

__all__ = [
    "Descriptor",
    "EMPTY_ALT",
    "NameResult",
    "NameSource",
    "NodeKind",
    "Role",
    "SoupTreeAdapter",
    "TreeAdapter",
    "compute_description",
    "compute_name",
    "describe",
    "get_grouping_labels",
    "get_role",
    "is_labelable",
    "normalize",
    "tree_from_html",
]
