"""Rendering of template-based expected markup."""

from __future__ import annotations

import logging
from typing import Any, TypeAlias

import jinja2
from pydantic import BaseModel, Field

from fluent_dom.errors import TemplateRenderError

logger = logging.getLogger(__name__)


class RenderFragment(BaseModel):
    """A template source plus the variables to render it with.

    Attributes:
    ----------
    source: str
        Jinja2 template text.
    variables: dict[str, Any]
        Values made available to the template.
    """

    source: str
    variables: dict[str, Any] = Field(default_factory=dict)


def fragment(source: str, **variables: Any) -> RenderFragment:
    """Shorthand for ``RenderFragment(source=..., variables=...)``."""
    return RenderFragment(source=source, variables=variables)


ExpectedMarkup: TypeAlias = str | jinja2.Template | RenderFragment


class RenderContext:
    """Turns expected values into markup text.

    Literal strings pass through untouched. Templates are rendered on every
    call; nothing is cached between calls.
    """

    def __init__(self, environment: jinja2.Environment | None = None) -> None:
        self._environment = environment or jinja2.Environment(
            autoescape=True,
            undefined=jinja2.StrictUndefined,
        )

    @property
    def environment(self) -> jinja2.Environment:
        return self._environment

    def render(self, expected: ExpectedMarkup) -> str:
        if isinstance(expected, str):
            return expected

        try:
            if isinstance(expected, jinja2.Template):
                markup = expected.render()
            elif isinstance(expected, RenderFragment):
                markup = self._environment.from_string(expected.source).render(**expected.variables)
            else:
                raise TypeError(f"Cannot render expected markup of type {type(expected).__name__}")
        except jinja2.TemplateError as exc:
            raise TemplateRenderError(f"Failed to render expected markup: {exc}") from exc

        if not markup.strip():
            logger.warning("Expected markup template rendered to an empty string")
        return markup


__all__ = ["ExpectedMarkup", "RenderContext", "RenderFragment", "fragment"]
