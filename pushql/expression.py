"""Compiled expression values: the valid/invalid dual.

Every compile or qualify call returns one of two frozen value types:

``SQLExpression``
    Valid.  Carries the SQL text fragment, safe to splice into generated SQL.

``InvalidExtractableExpression``
    Invalid.  Carries a validation error instead of text.  ``extract()``
    returns ``None`` rather than raising, so callers must check
    ``is_valid()`` first.

The ``CompiledExpression`` alias names the union.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Union

from pushql.errors import ExpressionValidationError

#: Error code for a relation of a kind the factory does not understand.
KIND_MISMATCH = "KIND_MISMATCH"

#: Error code for a column the relation does not expose.
MISSING_COLUMN = "MISSING_COLUMN"


class Expression(ABC):
    """Abstract base for anything a factory compiles."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return ``True`` when the expression can be used."""

    @abstractmethod
    def get_validation_error(self) -> str | None:
        """Return the validation error, or ``None`` for a valid expression."""


class ExtractableExpression(Expression):
    """An expression whose compiled text can be read back."""

    @abstractmethod
    def extract(self) -> str | None:
        """Return the compiled text, or ``None`` when invalid.

        Never raises.  Check :meth:`is_valid` before using the result.
        """

    @abstractmethod
    def unwrap(self) -> str:
        """Return the compiled text or raise if the expression is invalid.

        Raises:
            ExpressionValidationError: If the expression is invalid.
        """


@dataclass(frozen=True)
class SQLExpression(ExtractableExpression):
    """A valid SQL fragment.

    Attributes:
        expression: The SQL text, stored verbatim.
    """

    expression: str

    def is_valid(self) -> bool:
        return True

    def get_validation_error(self) -> str | None:
        return None

    def extract(self) -> str:
        return self.expression

    def unwrap(self) -> str:
        return self.expression

    def __str__(self) -> str:
        return self.expression


@dataclass(frozen=True)
class InvalidExtractableExpression(ExtractableExpression):
    """A failed compilation.

    Attributes:
        validation_error: Human-readable reason.
        code: Machine-readable error code (``KIND_MISMATCH`` or
            ``MISSING_COLUMN``).
        details: Extra context about the rejected reference.
    """

    validation_error: str
    code: str = KIND_MISMATCH
    details: dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.validation_error:
            raise ValueError("validation_error must not be empty")

    def is_valid(self) -> bool:
        return False

    def get_validation_error(self) -> str:
        return self.validation_error

    def extract(self) -> None:
        return None

    def unwrap(self) -> str:
        raise self.to_error()

    def to_error(self) -> ExpressionValidationError:
        """Return the exception :meth:`unwrap` raises, without raising it."""
        return ExpressionValidationError(
            self.validation_error, code=self.code, details=dict(self.details)
        )

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for the planner."""
        return self.to_error().to_error_response()


CompiledExpression = Union[SQLExpression, InvalidExtractableExpression]
