"""Identifier qualifier: raw name -> dialect-quoted literal."""
from __future__ import annotations

from collections.abc import Iterable

from pushql.dialect import SQLDialect


class IdentifierQualifier:
    """Wraps identifiers in a dialect's quote character.

    The identifier is never trimmed or re-cased.  ``escapes`` are applied
    in order before quoting; with no escapes the identifier is emitted
    unchanged between the quotes.

    Args:
        quote_char: Character placed before and after the identifier.
        escapes: Ordered ``(old, new)`` replacements.
    """

    __slots__ = ("_quote", "_escapes")

    def __init__(
        self,
        quote_char: str,
        escapes: Iterable[tuple[str, str]] = (),
    ) -> None:
        self._quote = quote_char
        self._escapes = tuple(escapes)

    @classmethod
    def for_dialect(cls, dialect: SQLDialect) -> IdentifierQualifier:
        """Build a qualifier from a :class:`~pushql.dialect.SQLDialect`."""
        return cls(dialect.quote_char, dialect.escapes)

    @property
    def quote_char(self) -> str:
        return self._quote

    def qualify(self, identifier: str) -> str:
        """Return ``identifier`` escaped and wrapped in the quote character.

        Args:
            identifier: Unquoted dataset or column name.

        Returns:
            Quoted identifier, e.g. ``amount`` -> `` `amount` ``.
        """
        for old, new in self._escapes:
            identifier = identifier.replace(old, new)
        return f"{self._quote}{identifier}{self._quote}"

    __call__ = qualify

    def __repr__(self) -> str:
        return f"IdentifierQualifier(quote_char={self._quote!r}, escapes={self._escapes!r})"
