"""fluent-dom - fluent assertions for rendered HTML in component tests."""

from .assertions import (
    AndConstraint,
    AssertionFailedError,
    AssertionResult,
    CollectionAssertions,
    ElementAssertions,
    assertion_scope,
    should,
)
from .config import FluentDomConfig, get_config, load_config, set_config
from .errors import FluentDomError, TemplateRenderError, UnsupportedSubjectError
from .markup import MarkupComparison, RenderContext, RenderFragment, compare_markup, fragment
from .version import __version__


__all__ = [
    # Assertions
    "should",
    "assertion_scope",
    "AndConstraint",
    "AssertionFailedError",
    "AssertionResult",
    "CollectionAssertions",
    "ElementAssertions",
    # Markup
    "MarkupComparison",
    "RenderContext",
    "RenderFragment",
    "compare_markup",
    "fragment",
    # Config
    "FluentDomConfig",
    "get_config",
    "load_config",
    "set_config",
    # Errors
    "FluentDomError",
    "TemplateRenderError",
    "UnsupportedSubjectError",
    "__version__",
]
