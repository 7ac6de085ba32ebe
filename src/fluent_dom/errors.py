"""Error types raised for misuse of fluent-dom (not for assertion failures)."""

from pathlib import Path


class FluentDomError(Exception):
    """Base class for usage errors."""


class UnsupportedSubjectError(FluentDomError):
    """Raised when a subject cannot be turned into an element to assert on."""


class TemplateRenderError(FluentDomError):
    """Raised when an expected-markup template fails to render."""


class ConfigError(FluentDomError):
    """Raised when the [tool.fluent-dom] table is invalid."""

    def __init__(self, path: Path, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause

        message = f"Invalid [tool.fluent-dom] configuration in {path}"
        if cause:
            message += f"\n\nCause: {cause}"

        super().__init__(message)
