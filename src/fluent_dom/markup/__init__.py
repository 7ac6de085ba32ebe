"""Markup parsing, rendering and comparison helpers."""

from .compare import MarkupComparison, compare_markup, differences
from .dom import parse_element, parse_fragment, to_markup
from .render import ExpectedMarkup, RenderContext, RenderFragment, fragment

__all__ = [
    "ExpectedMarkup",
    "MarkupComparison",
    "RenderContext",
    "RenderFragment",
    "compare_markup",
    "differences",
    "fragment",
    "parse_element",
    "parse_fragment",
    "to_markup",
]
