from .scope import (
    ASSERTION_SCOPE,
    AssertionScope,
    assertion_scope_context,
    current_scope,
)

__all__ = [
    "ASSERTION_SCOPE",
    "AssertionScope",
    "assertion_scope_context",
    "current_scope",
]
