"""
Text Normalizer
===============
Whitespace canonicalization for every string that ends up in an
accessible name or description.
"""

import re

# BOM is not matched by \s
_TRIM = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
_WHITESPACE_RUN = re.compile(r"[\s\ufeff]+")


def normalize(s: str) -> str:
    """Trim leading/trailing whitespace (BOM and NBSP included) and
    collapse internal whitespace runs to a single space."""
    return _WHITESPACE_RUN.sub(" ", _TRIM.sub("", s))


def attribute_value(tree, node, name: str) -> str:
    """Return the normalized value of attribute ``name``, or '' if absent.

    Callers that need to tell an absent attribute from an empty one
    use ``tree.has_attribute`` instead.
    """
    value = tree.get_attribute(node, name)
    return "" if value is None else normalize(value)
