"""Fluent assertion classes and the reporting chain behind them."""

from .base import AssertionFailedError, AssertionResult
from .collection import CollectionAssertions
from .element import ATTRIBUTE_SHORTCUTS, ElementAssertions
from .execution import AssertionChain, assertion_scope, execute, format_value
from .primitives import AndConstraint, ObjectAssertions, ReferenceTypeAssertions
from .should import should

__all__ = [
    "ATTRIBUTE_SHORTCUTS",
    "AndConstraint",
    "AssertionChain",
    "AssertionFailedError",
    "AssertionResult",
    "CollectionAssertions",
    "ElementAssertions",
    "ObjectAssertions",
    "ReferenceTypeAssertions",
    "assertion_scope",
    "execute",
    "format_value",
    "should",
]
