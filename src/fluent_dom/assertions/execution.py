"""Evaluation and reporting of assertion conditions.

Every assertion method funnels through :class:`AssertionChain`::

    execute("element").because(because, *because_args).for_condition(ok).fail_with(
        "Expected {context} to have attribute {0}{reason}, but found <null>.", name
    )

Failure templates understand these placeholders:

``{0}``, ``{1}``, ...
    Positional arguments, formatted with :func:`format_value`.
``{reason}``
    ``" because <reason>"`` when a reason was given, otherwise empty.
``{context}`` / ``{context:<default>}``
    The active scope's name, falling back to the chain identifier or
    ``<default>``.

Outside an :func:`assertion_scope` a failure raises
:class:`AssertionFailedError` straight away. Inside one, failures are
collected and raised together when the outermost scope closes.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from bs4.element import PageElement

from fluent_dom.assertions.base import AssertionFailedError, AssertionResult
from fluent_dom.config import get_config
from fluent_dom.context import AssertionScope, assertion_scope_context, current_scope
from fluent_dom.markup.dom import to_markup

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(
    r"\{(?:(?P<index>\d+)|(?P<reason>reason)|(?P<context>context)(?::(?P<default>[^}]*))?)\}"
)


def format_value(value: Any) -> str:
    """Render a value for a failure message."""
    if value is None:
        return "<null>"
    if isinstance(value, PageElement):
        return f'"{to_markup(value)}"'
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, type):
        return value.__qualname__
    if isinstance(value, Mapping):
        items = [f"{format_value(k)}: {format_value(v)}" for k, v in value.items()]
        return "{" + ", ".join(items) + "}" if items else "{empty}"
    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=str)
    if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
        items = [format_value(item) for item in value]
        return "{" + ", ".join(items) + "}" if items else "{empty}"
    return str(value)


def format_reason(reason: str, reason_args: tuple[Any, ...] = ()) -> str:
    if not reason or not reason.strip():
        return ""
    text = reason
    if reason_args:
        try:
            text = reason.format(*reason_args)
        except (IndexError, KeyError, ValueError) as exc:
            logger.debug("Could not format reason %r with %r: %s", reason, reason_args, exc)
    text = text.strip()
    if not text.lower().startswith("because"):
        text = f"because {text}"
    return f" {text}"


def format_message(
    template: str,
    args: tuple[Any, ...],
    *,
    reason: str = "",
    identifier: str = "object",
    scope_name: str | None = None,
) -> str:
    def substitute(match: re.Match[str]) -> str:
        if match.group("index") is not None:
            index = int(match.group("index"))
            if index >= len(args):
                return match.group(0)
            return format_value(args[index])
        if match.group("reason") is not None:
            return reason
        return scope_name or match.group("default") or identifier

    return _PLACEHOLDER.sub(substitute, template)


class AssertionChain:
    """Builder for a single reported condition."""

    def __init__(self, identifier: str = "object") -> None:
        self._identifier = identifier
        self._reason = ""
        self._reason_args: tuple[Any, ...] = ()
        self._condition = True

    def because(self, reason: str = "", *reason_args: Any) -> AssertionChain:
        self._reason = reason
        self._reason_args = reason_args
        return self

    def for_condition(self, condition: bool) -> AssertionChain:
        self._condition = bool(condition)
        return self

    def fail_with(self, message: str, *args: Any) -> bool:
        """Report the condition and return whether it held.

        Raises:
            AssertionFailedError: If the condition failed and no scope is
                collecting failures, or ``fail-fast`` is configured.
        """
        scope = current_scope()
        scope_name = scope.context_name() if scope is not None else None
        identifier = scope_name or self._identifier

        if self._condition:
            result = AssertionResult(passed=True, identifier=identifier)
        else:
            reason = format_reason(self._reason, self._reason_args)
            result = AssertionResult(
                passed=False,
                message=format_message(
                    message, args, reason=reason, identifier=self._identifier, scope_name=scope_name
                ),
                reason=reason.strip() or None,
                identifier=identifier,
            )
            logger.debug("Assertion failed: %s", result.message)

        if scope is not None:
            scope.add(result)
        if not result.passed and (scope is None or get_config().fail_fast):
            raise AssertionFailedError([result])
        return result.passed


def execute(identifier: str = "object") -> AssertionChain:
    """Start reporting a new condition."""
    return AssertionChain(identifier)


@contextmanager
def assertion_scope(name: str | None = None) -> Iterator[AssertionScope]:
    """Collect failures instead of raising on the first one.

    Nested scopes hand their results to the enclosing scope; the outermost
    scope raises one :class:`AssertionFailedError` listing every failure.

    Args:
        name: Identifier used for the subject in failure messages raised
            within the scope.
    """
    parent = current_scope()
    scope = AssertionScope(name=name, parent=parent)
    with assertion_scope_context(scope):
        yield scope

    if parent is not None:
        parent.results.extend(scope.results)
        return

    failures = scope.failures
    if failures:
        logger.debug("Assertion scope closed with %d failure(s)", len(failures))
        raise AssertionFailedError(failures)


__all__ = [
    "AssertionChain",
    "assertion_scope",
    "execute",
    "format_message",
    "format_reason",
    "format_value",
]
