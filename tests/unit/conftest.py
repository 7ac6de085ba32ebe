"""Shared fixtures for unit tests."""

from collections.abc import Callable

import pytest
from bs4 import Tag

from fluent_dom.config import FluentDomConfig, set_config
from fluent_dom.markup.dom import parse_element


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against default settings, ignoring any pyproject.toml."""
    set_config(FluentDomConfig())
    yield
    set_config(None)


@pytest.fixture
def element() -> Callable[[str], Tag]:
    """Parse markup into its first top-level element."""
    return parse_element
