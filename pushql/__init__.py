"""pushQL – expression compilation and identifier validation for SQL pushdown.

A planner delegating part of a logical plan to a SQL engine asks an
expression factory for quoted dataset and column references.  The factory
checks every reference against the relation it came from and returns
either a valid SQL fragment or an invalid expression explaining why.

Public API
----------
``SQLExpressionFactory``
    Capability discovery, raw-text compilation, reference qualification.

``IdentifierQualifier``
    Dialect-driven identifier quoting.

Re-exported types
-----------------
Relations, compiled expressions, dialects, capabilities and all error
classes::

    import pushql

    factory = pushql.SQLExpressionFactory()
    relation = pushql.BigQueryRelation.of("sales", ["id", "amount"])

    expr = factory.get_qualified_column_name(relation, "amount")
    if expr.is_valid():
        sql = f"SELECT {expr.extract()} FROM ..."
"""

from __future__ import annotations

from pushql.capability import Capability, ExpressionFactoryType
from pushql.dialect import (
    BIGQUERY,
    DEFAULT_DIALECT,
    MYSQL,
    POSTGRES,
    SQLITE,
    SQLDialect,
    get_dialect,
    registered_dialects,
)
from pushql.errors import DialectConfigError, ExpressionValidationError, PushQLError
from pushql.expression import (
    KIND_MISMATCH,
    MISSING_COLUMN,
    CompiledExpression,
    Expression,
    ExtractableExpression,
    InvalidExtractableExpression,
    SQLExpression,
)
from pushql.factory import ExpressionFactory, SQLExpressionFactory
from pushql.qualifier import IdentifierQualifier
from pushql.relation import BigQueryRelation, InvalidRelation, Relation, SourceDataset

__all__ = [
    # Factories
    "ExpressionFactory",
    "SQLExpressionFactory",
    # Capabilities
    "Capability",
    "ExpressionFactoryType",
    # Dialects
    "SQLDialect",
    "BIGQUERY",
    "MYSQL",
    "POSTGRES",
    "SQLITE",
    "DEFAULT_DIALECT",
    "get_dialect",
    "registered_dialects",
    "IdentifierQualifier",
    # Relations
    "Relation",
    "SourceDataset",
    "BigQueryRelation",
    "InvalidRelation",
    # Expressions
    "Expression",
    "ExtractableExpression",
    "SQLExpression",
    "InvalidExtractableExpression",
    "CompiledExpression",
    "KIND_MISMATCH",
    "MISSING_COLUMN",
    # Errors
    "PushQLError",
    "ExpressionValidationError",
    "DialectConfigError",
]
