"""Semantic HTML comparison.

Two pieces of markup are equal when they describe the same tree, ignoring
the differences a browser would ignore:

- attribute order, and the order of tokens in ``class``;
- whitespace-only text nodes, and runs of whitespace inside text
  (except under ``pre``, ``textarea``, ``script`` and ``style``);
- comments, unless ``ignore_comments`` is off;
- boolean attributes written as ``disabled``, ``disabled=""`` or
  ``disabled="disabled"``.

The result is a :class:`MarkupComparison` value, never an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from operator import itemgetter
from typing import Any

from bs4 import BeautifulSoup, Comment, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import PageElement, PreformattedString

from fluent_dom.config import get_config
from fluent_dom.markup.dom import parse_fragment

logger = logging.getLogger(__name__)

PRESERVE_WHITESPACE = frozenset({"pre", "textarea", "script", "style"})

BOOLEAN_ATTRIBUTES = frozenset(
    {
        "allowfullscreen",
        "async",
        "autofocus",
        "autoplay",
        "checked",
        "controls",
        "default",
        "defer",
        "disabled",
        "formnovalidate",
        "hidden",
        "inert",
        "ismap",
        "itemscope",
        "loop",
        "multiple",
        "muted",
        "nomodule",
        "novalidate",
        "open",
        "playsinline",
        "readonly",
        "required",
        "reversed",
        "selected",
    }
)


class MarkupComparison(Enum):
    """Outcome of comparing two pieces of markup."""

    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    STRUCTURAL_ERROR = "structural_error"

    @property
    def is_equal(self) -> bool:
        return self is MarkupComparison.EQUAL


@dataclass(frozen=True, slots=True)
class _Node:
    kind: str
    name: str
    attrs: tuple[tuple[str, Any], ...] = ()
    children: tuple[_Node, ...] = ()


def _canonical_attrs(element: Tag) -> tuple[tuple[str, Any], ...]:
    items: list[tuple[str, Any]] = []
    for name, value in element.attrs.items():
        if not isinstance(value, str):
            value = " ".join(value)
        if name == "class":
            items.append((name, frozenset(value.split())))
        elif name in BOOLEAN_ATTRIBUTES and value.lower() in ("", name):
            items.append((name, ""))
        else:
            items.append((name, value))
    return tuple(sorted(items, key=itemgetter(0)))


def _canonical(node: PageElement, ignore_comments: bool, preserve: bool) -> _Node | None:
    if isinstance(node, Comment):
        return None if ignore_comments else _Node("comment", node.strip())
    if isinstance(node, PreformattedString):
        return _Node(type(node).__name__.lower(), node.strip())
    if isinstance(node, NavigableString):
        text = str(node) if preserve else " ".join(node.split())
        if not text:
            return None
        return _Node("text", text)
    if isinstance(node, Tag):
        return _Node(
            "element",
            node.name,
            _canonical_attrs(node),
            _canonical_children(node, ignore_comments, preserve or node.name in PRESERVE_WHITESPACE),
        )
    return None


def _canonical_children(parent: Tag, ignore_comments: bool, preserve: bool = False) -> tuple[_Node, ...]:
    nodes = (_canonical(child, ignore_comments, preserve) for child in parent.contents)
    return tuple(node for node in nodes if node is not None)


def _canonical_nodes(source: str | PageElement, ignore_comments: bool) -> tuple[_Node, ...]:
    if isinstance(source, str) and not isinstance(source, NavigableString):
        return _canonical_children(parse_fragment(source), ignore_comments)
    if isinstance(source, BeautifulSoup):
        return _canonical_children(source, ignore_comments)
    if isinstance(source, PageElement):
        node = _canonical(source, ignore_comments, preserve=False)
        return (node,) if node is not None else ()
    raise TypeError(f"Cannot compare markup of type {type(source).__name__}")


def _resolve_nodes(
    actual: str | PageElement, expected: str | PageElement, ignore_comments: bool | None
) -> tuple[tuple[_Node, ...], tuple[_Node, ...]] | None:
    if ignore_comments is None:
        ignore_comments = get_config().ignore_comments
    try:
        actual_nodes = _canonical_nodes(actual, ignore_comments)
        expected_nodes = _canonical_nodes(expected, ignore_comments)
    except (TypeError, ParserRejectedMarkup) as exc:
        logger.debug("Markup could not be compared: %s", exc)
        return None
    if not actual_nodes or not expected_nodes:
        logger.debug("Markup comparison found an empty side")
        return None
    return actual_nodes, expected_nodes


def compare_markup(
    actual: str | PageElement,
    expected: str | PageElement,
    *,
    ignore_comments: bool | None = None,
) -> MarkupComparison:
    """Compare two pieces of markup.

    Parameters
    ----------
    actual : str | PageElement
        Markup text or a bs4 node (a whole soup compares by its children).
    expected : str | PageElement
        Markup to compare against.
    ignore_comments : bool | None
        Overrides the configured ``ignore-comments`` setting.

    Returns
    -------
    MarkupComparison
        ``STRUCTURAL_ERROR`` when either side is not markup, is rejected by
        the parser, or holds no nodes once insignificant content is dropped.
    """
    resolved = _resolve_nodes(actual, expected, ignore_comments)
    if resolved is None:
        return MarkupComparison.STRUCTURAL_ERROR
    actual_nodes, expected_nodes = resolved
    if actual_nodes == expected_nodes:
        return MarkupComparison.EQUAL
    return MarkupComparison.NOT_EQUAL


def _attr_text(value: Any) -> str | None:
    if isinstance(value, frozenset):
        return " ".join(sorted(value))
    return value


def _describe(node: _Node) -> str:
    if node.kind == "element":
        return f"<{node.name}>"
    return f"{node.kind} {node.name!r}"


def _diff(path: str, actual: tuple[_Node, ...], expected: tuple[_Node, ...], out: list[str]) -> None:
    if len(actual) != len(expected):
        out.append(f"{path or '/'}: expected {len(expected)} child nodes, found {len(actual)}")
    for index, (found, wanted) in enumerate(zip(actual, expected)):
        here = f"{path}/{wanted.name if wanted.kind == 'element' else wanted.kind}[{index}]"
        if found.kind != wanted.kind or found.name != wanted.name:
            out.append(f"{here}: expected {_describe(wanted)}, found {_describe(found)}")
            continue
        if found.attrs != wanted.attrs:
            found_attrs, wanted_attrs = dict(found.attrs), dict(wanted.attrs)
            for name in sorted(found_attrs.keys() | wanted_attrs.keys()):
                if found_attrs.get(name) != wanted_attrs.get(name):
                    out.append(
                        f"{here}[@{name}]: expected {_attr_text(wanted_attrs.get(name))!r}, "
                        f"found {_attr_text(found_attrs.get(name))!r}"
                    )
        _diff(here, found.children, wanted.children, out)


def differences(
    actual: str | PageElement,
    expected: str | PageElement,
    *,
    ignore_comments: bool | None = None,
) -> list[str]:
    """List where two pieces of markup diverge, one line per mismatch."""
    resolved = _resolve_nodes(actual, expected, ignore_comments)
    if resolved is None:
        return ["markup could not be compared structurally"]
    out: list[str] = []
    _diff("", *resolved, out)
    return out


__all__ = ["BOOLEAN_ATTRIBUTES", "MarkupComparison", "compare_markup", "differences"]
