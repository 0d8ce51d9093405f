"""Pydantic models for the relation descriptors supplied by the planner.

A relation is the planner's read-only view of one relational node: the
dataset it reads from and the columns it exposes.  pushQL never creates
or mutates relations; it only inspects them before qualifying references.

:class:`Relation` is a closed family.  The SQL factory understands exactly
one concrete kind, :class:`BigQueryRelation`; anything else (including
:class:`InvalidRelation`) is reported as a kind mismatch.

Usage::

    relation = BigQueryRelation.of("sales", ["id", "amount"])
    relation.has_column("amount")   # True
    relation.dataset_name           # 'sales'
"""
from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, field_validator

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class Relation(BaseModel):
    """Base type of every relation handed to an expression factory."""

    model_config = _FROZEN

    def is_valid(self) -> bool:
        return True

    def get_validation_error(self) -> str | None:
        return None


class SourceDataset(BaseModel):
    """The dataset a relation reads from.

    Attributes:
        dataset_name: Dataset identifier used in generated SQL.
        project: Owning project, when the planner knows it.
    """

    model_config = _FROZEN

    dataset_name: str
    project: str | None = None


class BigQueryRelation(Relation):
    """A relation backed by a BigQuery dataset.

    Attributes:
        source_dataset: Dataset the relation reads from.
        columns: Column names exposed by the relation.  Set semantics:
            duplicates collapse and order is not kept.
    """

    source_dataset: SourceDataset
    columns: frozenset[str]

    @classmethod
    def of(
        cls,
        dataset_name: str,
        columns: Iterable[str],
        project: str | None = None,
    ) -> BigQueryRelation:
        """Build a relation from a dataset name and column names."""
        return cls(
            source_dataset=SourceDataset(dataset_name=dataset_name, project=project),
            columns=frozenset(columns),
        )

    @property
    def dataset_name(self) -> str:
        return self.source_dataset.dataset_name

    def has_column(self, name: str) -> bool:
        """Exact, case-sensitive membership test."""
        return name in self.columns

    @property
    def column_names(self) -> list[str]:
        """Returns the exposed column names, sorted."""
        return sorted(self.columns)


class InvalidRelation(Relation):
    """A relation the planner has already rejected.

    Attributes:
        validation_error: Why the relation cannot be used.
    """

    validation_error: str

    @field_validator("validation_error")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("validation_error must not be empty")
        return value

    def is_valid(self) -> bool:
        return False

    def get_validation_error(self) -> str | None:
        return self.validation_error
