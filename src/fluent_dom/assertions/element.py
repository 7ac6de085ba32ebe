"""Assertions over a rendered HTML element."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from bs4 import Tag
from bs4.element import PageElement

from fluent_dom.assertions.collection import CollectionAssertions
from fluent_dom.assertions.primitives import AndConstraint, ReferenceTypeAssertions
from fluent_dom.config import get_config
from fluent_dom.markup.compare import MarkupComparison, compare_markup, differences
from fluent_dom.markup.dom import attribute_value, class_list, first_child, local_name, to_markup
from fluent_dom.markup.render import ExpectedMarkup, RenderContext

logger = logging.getLogger(__name__)

# Shortcut method name -> attribute it checks with ``have_attribute``.
ATTRIBUTE_SHORTCUTS: dict[str, str] = {
    "have_alt_text": "alt",
    "have_aria_label": "aria-label",
    "have_data_test_class": "data-test-class",
    "have_data_test_id": "data-test-id",
    "have_href": "href",
    "have_id": "id",
    "have_src": "src",
    "have_target": "target",
    "have_title": "title",
    "have_type": "type",
}

_Shortcut = Callable[..., "AndConstraint[ElementAssertions]"]


class ElementAssertions(ReferenceTypeAssertions[Tag]):
    """Fluent assertions over a ``bs4.Tag``.

    Every method takes optional ``because`` / ``*because_args`` describing
    why the expectation matters and returns an :class:`AndConstraint` for
    chaining. Mismatches are reported through the assertion chain; nothing
    here raises for an ordinary failed expectation.

    Expected markup may be a literal string, a ``jinja2.Template`` or a
    :class:`~fluent_dom.markup.render.RenderFragment`; templates are rendered
    by a render context owned by this instance.
    """

    have_alt_text: _Shortcut
    have_aria_label: _Shortcut
    have_data_test_class: _Shortcut
    have_data_test_id: _Shortcut
    have_href: _Shortcut
    have_id: _Shortcut
    have_src: _Shortcut
    have_target: _Shortcut
    have_title: _Shortcut
    have_type: _Shortcut

    def __init__(
        self,
        subject: Tag,
        identifier: str | None = None,
        render_context: RenderContext | None = None,
    ) -> None:
        super().__init__(subject, identifier or get_config().element_identifier)
        self._render_context = render_context or RenderContext()

    def have_attribute(
        self, name: str, expected_value: str, because: str = "", *because_args: Any
    ) -> AndConstraint[ElementAssertions]:
        """Assert attribute ``name`` is present with exactly ``expected_value``."""
        value = attribute_value(self.subject, name)

        present = self._execute(because, because_args).for_condition(value is not None).fail_with(
            "Expected {context} to have attribute {0}{reason}, but found <null>.", name
        )
        if present:
            self._execute(because, because_args).for_condition(value == expected_value).fail_with(
                "Expected {context} {0} attribute to have value {1}{reason}, but found {2}.",
                name,
                expected_value,
                value,
            )
        return self._and()

    def have_tag(self, expected: str, because: str = "", *because_args: Any) -> AndConstraint[ElementAssertions]:
        """Assert the local tag name equals ``expected`` (case-sensitive)."""
        tag = local_name(self.subject)
        self._execute(because, because_args).for_condition(tag == expected).fail_with(
            "Expected {context} {0} to be {1}{reason}, but found {2}.", "tag", expected, tag
        )
        return self._and()

    def have_class(self, expected: str, because: str = "", *because_args: Any) -> AndConstraint[ElementAssertions]:
        self._class_list().contain(expected, because, *because_args)
        return self._and()

    def not_have_class(
        self, expected: str, because: str = "", *because_args: Any
    ) -> AndConstraint[ElementAssertions]:
        self._class_list().not_contain(expected, because, *because_args)
        return self._and()

    def have_rel(self, expected: str, because: str = "", *because_args: Any) -> AndConstraint[ElementAssertions]:
        """Assert ``expected`` is one of the space-separated ``rel`` tokens.

        Tokens are split on a single space only, so ``"a  b"`` yields an
        empty token between ``a`` and ``b``.
        """
        value = attribute_value(self.subject, "rel")

        present = self._execute(because, because_args).for_condition(value is not None).fail_with(
            "Expected {context} to have attribute {0}{reason}, but found <null>.", "rel"
        )
        if present:
            tokens = value.split(" ")
            self._execute(because, because_args).for_condition(expected in tokens).fail_with(
                "Expected {context} {0} [{1}] to contain {2}{reason}.", "rel", tokens, expected
            )
        return self._and()

    def have_markup(
        self, expected: ExpectedMarkup, because: str = "", *because_args: Any
    ) -> AndConstraint[ElementAssertions]:
        """Assert the element's markup is semantically equal to ``expected``."""
        expected_markup = self._render_context.render(expected)
        outcome = compare_markup(self.subject, expected_markup)
        self._log_outcome(outcome, self.subject, expected_markup)

        self._execute(because, because_args).for_condition(outcome.is_equal).fail_with(
            "Expected {context} markup {0}{reason}, but found {1}.", expected_markup, to_markup(self.subject)
        )
        return self._and()

    def have_child_markup(
        self, expected: ExpectedMarkup, because: str = "", *because_args: Any
    ) -> AndConstraint[ElementAssertions]:
        """Assert the first child node's markup is semantically equal to ``expected``.

        The first child may be a text node; whitespace between tags counts.
        """
        expected_markup = self._render_context.render(expected)
        child = first_child(self.subject)

        present = self._execute(because, because_args).for_condition(child is not None).fail_with(
            "Expected {context} to have child {0}{reason}, but found <null>.", expected_markup
        )
        if present:
            outcome = compare_markup(child, expected_markup)
            self._log_outcome(outcome, child, expected_markup)
            self._execute(because, because_args).for_condition(outcome.is_equal).fail_with(
                "Expected {context} to have child {0}{reason}, but found {1}.",
                expected_markup,
                to_markup(child).lstrip(),
            )
        return self._and()

    def _class_list(self) -> CollectionAssertions:
        return CollectionAssertions(class_list(self.subject), identifier=f"{self.identifier} class list")

    @staticmethod
    def _log_outcome(outcome: MarkupComparison, actual: PageElement, expected_markup: str) -> None:
        if outcome.is_equal or not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug(
            "Markup comparison returned %s:\n%s",
            outcome.value,
            "\n".join(differences(actual, expected_markup)),
        )


def _attribute_shortcut(method_name: str, attribute: str) -> _Shortcut:
    def shortcut(
        self: ElementAssertions, expected: str, because: str = "", *because_args: Any
    ) -> AndConstraint[ElementAssertions]:
        return self.have_attribute(attribute, expected, because, *because_args)

    shortcut.__name__ = method_name
    shortcut.__qualname__ = f"ElementAssertions.{method_name}"
    shortcut.__doc__ = f"Assert the ``{attribute}`` attribute equals ``expected``."
    return shortcut


for _method_name, _attribute in ATTRIBUTE_SHORTCUTS.items():
    setattr(ElementAssertions, _method_name, _attribute_shortcut(_method_name, _attribute))


__all__ = ["ATTRIBUTE_SHORTCUTS", "ElementAssertions"]
