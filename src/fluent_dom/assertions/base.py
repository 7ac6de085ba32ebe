"""Assertion result and failure types."""

from pydantic import BaseModel


class AssertionResult(BaseModel):
    """Outcome of one evaluated condition.

    Attributes:
    ----------
    passed: bool
        Whether the condition held.
    message: str | None
        Formatted failure message; ``None`` for passing results.
    reason: str | None
        The "because ..." clause supplied by the caller, if any.
    identifier: str | None
        Name the subject was reported under.
    """

    passed: bool
    message: str | None = None
    reason: str | None = None
    identifier: str | None = None

    def __repr__(self) -> str:
        return self.model_dump_json(indent=2, exclude_none=True)

    def __bool__(self) -> bool:
        return self.passed


class AssertionFailedError(AssertionError):
    """AssertionError carrying the failed results that caused it."""

    def __init__(self, results: list[AssertionResult]):
        self.results = list(results)
        message = "\n".join(result.message or "assertion failed" for result in self.results)
        super().__init__(message)

    @property
    def result(self) -> AssertionResult:
        """The first failure."""
        return self.results[0]
