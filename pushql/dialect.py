"""Pydantic models for the SQL dialect configuration.

A :class:`SQLDialect` owns the identifier-quoting rule of one SQL engine.
It is handed to :class:`~pushql.factory.SQLExpressionFactory` (either as an
object or by registered name) and injected from there into the
:class:`~pushql.qualifier.IdentifierQualifier`::

    from pushql import SQLExpressionFactory, get_dialect

    factory = SQLExpressionFactory(get_dialect("bigquery"))

    # or a custom dialect
    factory = SQLExpressionFactory(
        SQLDialect(name="spark", quote_char="`", escapes=(("`", "``"),))
    )
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from pushql.errors import DialectConfigError


class SQLDialect(BaseModel):
    """Identifier-quoting rule for a single SQL engine.

    Attributes:
        name: Canonical dialect name (e.g. ``'bigquery'``).
        quote_char: Single character placed before and after identifiers.
        escapes: Ordered ``(old, new)`` replacements applied to an
            identifier before it is quoted.  Empty emits the identifier
            unchanged.  Replacements run in sequence, so an escape
            character must be escaped before the quote character.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    quote_char: str
    escapes: tuple[tuple[str, str], ...] = ()

    @field_validator("name")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("dialect name must not be empty")
        return value

    @field_validator("quote_char")
    @classmethod
    def _check_quote_char(cls, value: str) -> str:
        if len(value) != 1 or value.isspace():
            raise ValueError(
                f"quote_char must be a single non-whitespace character, got {value!r}"
            )
        return value

    @field_validator("escapes")
    @classmethod
    def _check_escapes(
        cls, value: tuple[tuple[str, str], ...]
    ) -> tuple[tuple[str, str], ...]:
        for old, new in value:
            if not old or not new:
                raise ValueError(f"escape pair must not be empty, got {(old, new)!r}")
        return value


# ---------------------------------------------------------------------------
# Built-in dialects
# ---------------------------------------------------------------------------

#: GoogleSQL: backtick-quoted, backslash escapes.  Backslashes are doubled
#: first so an identifier cannot cancel the escape or the closing quote.
BIGQUERY = SQLDialect(
    name="bigquery",
    quote_char="`",
    escapes=(("\\", "\\\\"), ("`", "\\`")),
)

#: MySQL: backtick-quoted, embedded backticks doubled.
MYSQL = SQLDialect(name="mysql", quote_char="`", escapes=(("`", "``"),))

#: PostgreSQL: double-quoted, embedded double quotes doubled.
POSTGRES = SQLDialect(name="postgres", quote_char='"', escapes=(('"', '""'),))

#: SQLite: same rule as PostgreSQL.
SQLITE = SQLDialect(name="sqlite", quote_char='"', escapes=(('"', '""'),))

_DIALECTS: dict[str, SQLDialect] = {
    d.name: d for d in (BIGQUERY, MYSQL, POSTGRES, SQLITE)
}

DEFAULT_DIALECT = BIGQUERY


def get_dialect(name: str) -> SQLDialect:
    """Return the built-in dialect registered under ``name``.

    Args:
        name: Dialect name, case-insensitive (e.g. ``"BigQuery"``).

    Returns:
        The matching :class:`SQLDialect`.

    Raises:
        DialectConfigError: If no dialect is registered for ``name``.
    """
    dialect = _DIALECTS.get(name.strip().lower())
    if dialect is None:
        raise DialectConfigError(
            f"Unsupported dialect: '{name}'. Registered dialects: {registered_dialects()}.",
            name=name,
        )
    return dialect


def registered_dialects() -> list[str]:
    """Return the sorted list of built-in dialect names."""
    return sorted(_DIALECTS)
