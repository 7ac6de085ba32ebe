"""Read-only accessors over BeautifulSoup nodes.

Everything the assertions need from a subject element goes through these
helpers: attribute lookup, class tokens, tag name, first child and markup
serialization.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement

from fluent_dom.errors import UnsupportedSubjectError

PARSER = "html.parser"


def parse_fragment(markup: str) -> BeautifulSoup:
    """Parse markup without splitting multi-valued attributes.

    Keeping ``class``/``rel`` as raw strings means attribute values are
    reported exactly as written.
    """
    return BeautifulSoup(markup, PARSER, multi_valued_attributes=None)


def parse_element(markup: str) -> Tag:
    """Parse markup and return its first top-level element."""
    soup = parse_fragment(markup)
    element = first_element(soup)
    if element is None:
        raise UnsupportedSubjectError(f"No element found in markup: {markup!r}")
    return element


def first_element(node: Tag) -> Tag | None:
    return next((child for child in node.contents if isinstance(child, Tag)), None)


def attribute_value(element: Tag, name: str) -> str | None:
    """Return the attribute's string value, or ``None`` when absent.

    bs4 may have split multi-valued attributes into a list; those are joined
    back with single spaces.
    """
    value = element.attrs.get(name)
    if value is None or isinstance(value, str):
        return value
    return " ".join(value)


def class_list(element: Tag) -> list[str]:
    value = element.attrs.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


def local_name(element: Tag) -> str:
    name = element.name
    prefix = element.prefix
    if prefix and name.startswith(f"{prefix}:"):
        return name[len(prefix) + 1 :]
    return name


def first_child(element: Tag) -> PageElement | None:
    """First child node, text and comments included."""
    return element.contents[0] if element.contents else None


def to_markup(node: PageElement) -> str:
    """Serialize a node back to HTML."""
    if isinstance(node, NavigableString):
        # Comments, doctypes and CDATA get their delimiters here; text is escaped.
        return node.output_ready()
    return str(node)


__all__ = [
    "PARSER",
    "attribute_value",
    "class_list",
    "first_child",
    "first_element",
    "local_name",
    "parse_element",
    "parse_fragment",
    "to_markup",
]
