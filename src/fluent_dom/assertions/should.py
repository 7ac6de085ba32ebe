"""``should()`` entry point choosing the assertions class for a subject."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, overload

from bs4 import BeautifulSoup, NavigableString, Tag

from fluent_dom.assertions.collection import CollectionAssertions
from fluent_dom.assertions.element import ElementAssertions
from fluent_dom.assertions.primitives import ObjectAssertions
from fluent_dom.errors import UnsupportedSubjectError
from fluent_dom.markup.dom import first_element, parse_element


@overload
def should(subject: Tag | str, identifier: str | None = None) -> ElementAssertions: ...


@overload
def should(subject: Iterable[Any], identifier: str | None = None) -> CollectionAssertions: ...


@overload
def should(subject: Any, identifier: str | None = None) -> ObjectAssertions: ...


def should(subject: Any, identifier: str | None = None) -> Any:
    """Start a chain of assertions on ``subject``.

    - a ``bs4.Tag`` is asserted on directly;
    - a ``BeautifulSoup`` document or a markup string is reduced to its first
      top-level element;
    - other iterables get collection assertions;
    - anything else gets the basic reference assertions.

    Raises:
        UnsupportedSubjectError: If a document or markup string holds no element.
    """
    if isinstance(subject, BeautifulSoup):
        element = first_element(subject)
        if element is None:
            raise UnsupportedSubjectError("Document contains no element to assert on")
        return ElementAssertions(element, identifier)
    if isinstance(subject, Tag):
        return ElementAssertions(subject, identifier)
    if isinstance(subject, NavigableString):
        return ObjectAssertions(subject, identifier)
    if isinstance(subject, str):
        return ElementAssertions(parse_element(subject), identifier)
    if isinstance(subject, Iterable) and not isinstance(subject, (bytes, bytearray, Mapping)):
        return CollectionAssertions(subject, identifier)
    return ObjectAssertions(subject, identifier)


__all__ = ["should"]
