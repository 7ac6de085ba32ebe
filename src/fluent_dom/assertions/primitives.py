"""Chain handle and the assertions shared by every subject type."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fluent_dom.assertions.execution import AssertionChain, execute

T = TypeVar("T")
TAssertions = TypeVar("TAssertions", bound="ReferenceTypeAssertions[Any]")
TSubject = TypeVar("TSubject")


@dataclass(frozen=True, slots=True)
class AndConstraint(Generic[T]):
    """Returned by every assertion so calls can be chained::

        should(link).have_href("/home").and_.have_target("_blank")
    """

    and_: T


class ReferenceTypeAssertions(Generic[TSubject]):
    """Base class holding the subject under assertion."""

    identifier = "object"

    def __init__(self, subject: TSubject, identifier: str | None = None) -> None:
        self.subject = subject
        if identifier is not None:
            self.identifier = identifier

    def _execute(self, because: str, because_args: tuple[Any, ...]) -> AssertionChain:
        return execute(self.identifier).because(because, *because_args)

    def _and(self: TAssertions) -> AndConstraint[TAssertions]:
        return AndConstraint(self)

    def be_none(self: TAssertions, because: str = "", *because_args: Any) -> AndConstraint[TAssertions]:
        self._execute(because, because_args).for_condition(self.subject is None).fail_with(
            "Expected {context} to be <null>{reason}, but found {0}.", self.subject
        )
        return self._and()

    def not_be_none(self: TAssertions, because: str = "", *because_args: Any) -> AndConstraint[TAssertions]:
        self._execute(because, because_args).for_condition(self.subject is not None).fail_with(
            "Expected {context} not to be <null>{reason}."
        )
        return self._and()

    def be_same_as(
        self: TAssertions, expected: Any, because: str = "", *because_args: Any
    ) -> AndConstraint[TAssertions]:
        self._execute(because, because_args).for_condition(self.subject is expected).fail_with(
            "Expected {context} to refer to {0}{reason}, but found {1}.", expected, self.subject
        )
        return self._and()

    def not_be_same_as(
        self: TAssertions, unexpected: Any, because: str = "", *because_args: Any
    ) -> AndConstraint[TAssertions]:
        self._execute(because, because_args).for_condition(self.subject is not unexpected).fail_with(
            "Did not expect {context} to refer to {0}{reason}.", unexpected
        )
        return self._and()

    def be_of_type(
        self: TAssertions, expected: type, because: str = "", *because_args: Any
    ) -> AndConstraint[TAssertions]:
        self._execute(because, because_args).for_condition(type(self.subject) is expected).fail_with(
            "Expected type to be {0}{reason}, but found {1}.", expected, type(self.subject)
        )
        return self._and()

    def satisfy(
        self: TAssertions,
        predicate: Callable[[Any], bool],
        description: str | None = None,
        because: str = "",
        *because_args: Any,
    ) -> AndConstraint[TAssertions]:
        """Assert ``predicate(subject)`` is truthy."""
        label = description or getattr(predicate, "__name__", repr(predicate))
        self._execute(because, because_args).for_condition(predicate(self.subject)).fail_with(
            "Expected {context} to match {0}{reason}, but found {1}.", label, self.subject
        )
        return self._and()


class ObjectAssertions(ReferenceTypeAssertions[Any]):
    pass


__all__ = ["AndConstraint", "ObjectAssertions", "ReferenceTypeAssertions"]
