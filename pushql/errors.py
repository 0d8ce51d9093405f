"""Custom exception hierarchy for pushQL.

Reference failures (unsupported relation kind, missing column) are returned
as :class:`~pushql.expression.InvalidExtractableExpression` values and never
raised.  The exceptions below exist for the opt-in raising path
(:meth:`~pushql.expression.ExtractableExpression.unwrap`) and for
configuration mistakes.

All public errors inherit from PushQLError so callers can catch the base
class for any pushQL-specific failure.
"""
from __future__ import annotations

from typing import Any


class PushQLError(Exception):
    """Base exception for all pushQL errors."""


class ExpressionValidationError(PushQLError):
    """Raised when an invalid expression is unwrapped.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. MISSING_COLUMN).
        details: Extra context about the rejected reference.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for the planner."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class DialectConfigError(PushQLError):
    """Raised when a dialect name cannot be resolved.

    Detected when the factory is constructed, before any reference is
    qualified.

    Args:
        message: Human-readable description.
        name: The dialect name that was requested.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name
