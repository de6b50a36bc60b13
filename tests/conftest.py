"""Pytest configuration and fixtures."""
import pytest

from accname.config import Settings
from accname.dom.soup_adapter import tree_from_html


@pytest.fixture
def make_tree():
    """Build a SoupTreeAdapter from an HTML snippet."""
    return tree_from_html


@pytest.fixture
def settings():
    """Settings with defaults, independent of the environment."""
    return Settings(
        log_level="DEBUG",
        max_tree_depth=256,
        max_reference_depth=8,
        include_hidden=False,
    )
