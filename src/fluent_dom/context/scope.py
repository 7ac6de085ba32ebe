from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from fluent_dom.assertions.base import AssertionResult


ASSERTION_SCOPE: ContextVar[AssertionScope | None] = ContextVar("assertion_scope", default=None)


@dataclass(slots=True)
class AssertionScope:
    """Collects assertion results evaluated while the scope is active.

    Attributes
    ----------
    name
        Identifier substituted for the subject in failure messages.
    parent
        Enclosing scope; failures are handed to it when this scope closes.
    results
        Every result evaluated within the scope, passing ones included.
    """

    name: str | None = None
    parent: AssertionScope | None = None
    results: list[AssertionResult] = field(default_factory=list)

    @property
    def failures(self) -> list[AssertionResult]:
        return [result for result in self.results if not result.passed]

    def add(self, result: AssertionResult) -> None:
        self.results.append(result)

    def context_name(self) -> str | None:
        """Nearest scope name, looking outwards through parents."""
        scope: AssertionScope | None = self
        while scope is not None:
            if scope.name:
                return scope.name
            scope = scope.parent
        return None


def current_scope() -> AssertionScope | None:
    return ASSERTION_SCOPE.get()


@contextmanager
def assertion_scope_context(scope: AssertionScope) -> Iterator[AssertionScope]:
    token = ASSERTION_SCOPE.set(scope)
    try:
        yield scope
    finally:
        ASSERTION_SCOPE.reset(token)
