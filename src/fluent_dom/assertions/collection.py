"""Assertions over collections of items."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from fluent_dom.assertions.primitives import AndConstraint, ReferenceTypeAssertions


class CollectionAssertions(ReferenceTypeAssertions[list[Any]]):
    """Membership and size checks; the subject is snapshotted into a list."""

    identifier = "collection"

    def __init__(self, subject: Iterable[Any] | None, identifier: str | None = None) -> None:
        super().__init__(None if subject is None else list(subject), identifier)

    def contain(self, expected: Any, because: str = "", *because_args: Any) -> AndConstraint[CollectionAssertions]:
        if self._not_none(because, because_args, "to contain {0}", expected):
            self._execute(because, because_args).for_condition(expected in self.subject).fail_with(
                "Expected {context} {0} to contain {1}{reason}.", self.subject, expected
            )
        return self._and()

    def not_contain(
        self, unexpected: Any, because: str = "", *because_args: Any
    ) -> AndConstraint[CollectionAssertions]:
        if self._not_none(because, because_args, "to not contain {0}", unexpected):
            self._execute(because, because_args).for_condition(unexpected not in self.subject).fail_with(
                "Expected {context} {0} to not contain {1}{reason}.", self.subject, unexpected
            )
        return self._and()

    def have_count(self, expected: int, because: str = "", *because_args: Any) -> AndConstraint[CollectionAssertions]:
        if self._not_none(because, because_args, "to contain {0} item(s)", expected):
            self._execute(because, because_args).for_condition(len(self.subject) == expected).fail_with(
                "Expected {context} to contain {0} item(s){reason}, but found {1}: {2}.",
                expected,
                len(self.subject),
                self.subject,
            )
        return self._and()

    def be_empty(self, because: str = "", *because_args: Any) -> AndConstraint[CollectionAssertions]:
        if self._not_none(because, because_args, "to be empty"):
            self._execute(because, because_args).for_condition(not self.subject).fail_with(
                "Expected {context} to be empty{reason}, but found {0}.", self.subject
            )
        return self._and()

    def not_be_empty(self, because: str = "", *because_args: Any) -> AndConstraint[CollectionAssertions]:
        if self._not_none(because, because_args, "not to be empty"):
            self._execute(because, because_args).for_condition(bool(self.subject)).fail_with(
                "Expected {context} not to be empty{reason}."
            )
        return self._and()

    def _not_none(self, because: str, because_args: tuple[Any, ...], expectation: str, *args: Any) -> bool:
        return self._execute(because, because_args).for_condition(self.subject is not None).fail_with(
            "Expected {context} " + expectation + "{reason}, but found <null>.", *args
        )


__all__ = ["CollectionAssertions"]
