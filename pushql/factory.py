"""Expression factories: capability discovery, compilation, qualification.

The Strategy pattern (GoF) is used:
- ``ExpressionFactory`` declares the contract a planner relies on.
- ``SQLExpressionFactory`` implements it for SQL engines, with the quoting
  rule supplied by an injected :class:`~pushql.dialect.SQLDialect`.

Reference checks happen exactly once, here.  Any valid expression returned
by a factory can be spliced into generated SQL without re-checking the
relation kind or column existence.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from pushql.capability import Capability, ExpressionFactoryType
from pushql.dialect import DEFAULT_DIALECT, SQLDialect, get_dialect
from pushql.expression import (
    KIND_MISMATCH,
    MISSING_COLUMN,
    CompiledExpression,
    Expression,
    InvalidExtractableExpression,
    SQLExpression,
)
from pushql.qualifier import IdentifierQualifier
from pushql.relation import BigQueryRelation, Relation


class ExpressionFactory(ABC):
    """Abstract base for factories that compile expressions for a planner."""

    @abstractmethod
    def get_type(self) -> Capability:
        """Return the expression language this factory produces."""

    @abstractmethod
    def get_capabilities(self) -> set[Capability]:
        """Return a fresh set of every capability this factory supports."""

    @abstractmethod
    def compile(self, expression: str) -> Expression:
        """Compile raw expression text."""

    @abstractmethod
    def get_qualified_dataset_name(self, relation: Relation) -> CompiledExpression:
        """Return the qualified dataset name of ``relation``."""

    @abstractmethod
    def get_qualified_column_name(
        self, relation: Relation, column: str
    ) -> CompiledExpression:
        """Return the qualified name of ``column`` in ``relation``."""

    def get_supported_capability(self) -> Capability:
        """Alias of :meth:`get_type`."""
        return self.get_type()


class SQLExpressionFactory(ExpressionFactory):
    """Compiles SQL strings into :class:`~pushql.expression.SQLExpression`.

    Only :class:`~pushql.relation.BigQueryRelation` instances can be
    qualified; every other relation yields an invalid expression.

    Args:
        dialect: Quoting rule to apply, as a :class:`SQLDialect` or a
            registered dialect name.  Defaults to BigQuery.

    Raises:
        DialectConfigError: If ``dialect`` is an unknown name.
    """

    def __init__(self, dialect: SQLDialect | str = DEFAULT_DIALECT) -> None:
        if isinstance(dialect, str):
            dialect = get_dialect(dialect)
        self._dialect = dialect
        self._qualifier = IdentifierQualifier.for_dialect(dialect)

    @property
    def dialect(self) -> SQLDialect:
        return self._dialect

    def get_type(self) -> ExpressionFactoryType:
        return ExpressionFactoryType.SQL

    def get_capabilities(self) -> set[Capability]:
        return {ExpressionFactoryType.SQL}

    def compile(self, expression: str) -> SQLExpression:
        """Wrap ``expression`` as a valid SQL expression.

        The text is not parsed or checked; an empty string is accepted.
        """
        return SQLExpression(expression)

    def get_qualified_dataset_name(self, relation: Relation) -> CompiledExpression:
        """Return the dataset name of ``relation`` wrapped in quotes.

        Args:
            relation: Relation supplied by the planner.

        Returns:
            A valid expression holding the quoted dataset name, or an
            invalid expression if the relation is not a BigQueryRelation.
        """
        checked = self._check_relation(relation)
        if isinstance(checked, InvalidExtractableExpression):
            return checked
        return SQLExpression(self.qualify(checked.dataset_name))

    def get_qualified_column_name(
        self, relation: Relation, column: str
    ) -> CompiledExpression:
        """Return ``column`` wrapped in quotes.

        Args:
            relation: Relation supplied by the planner.
            column: Column name to qualify.

        Returns:
            A valid expression holding the quoted column name, or an invalid
            expression if the relation is not a BigQueryRelation or does
            not expose ``column``.
        """
        checked = self._check_relation(relation)
        if isinstance(checked, InvalidExtractableExpression):
            return checked

        if not checked.has_column(column):
            return InvalidExtractableExpression(
                f"Column {column} is not present in dataset",
                code=MISSING_COLUMN,
                details={
                    "dataset": checked.dataset_name,
                    "column": column,
                    "available_columns": checked.column_names,
                },
            )

        return SQLExpression(self.qualify(column))

    def qualify(self, identifier: str) -> str:
        """Wrap ``identifier`` in this factory's quote character."""
        return self._qualifier.qualify(identifier)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_relation(
        relation: object,
    ) -> BigQueryRelation | InvalidExtractableExpression:
        """Narrow ``relation`` to the one kind this factory understands."""
        if isinstance(relation, BigQueryRelation):
            return relation
        details = {"relation_type": type(relation).__name__}
        if isinstance(relation, Relation) and not relation.is_valid():
            details["relation_error"] = relation.get_validation_error()
        return InvalidExtractableExpression(
            "Relation is not BigQueryRelation",
            code=KIND_MISMATCH,
            details=details,
        )

    def __repr__(self) -> str:
        return f"SQLExpressionFactory(dialect={self._dialect.name!r})"
