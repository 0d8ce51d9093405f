"""Unit tests for the relation descriptors."""
from __future__ import annotations

import pydantic
import pytest

from pushql.relation import BigQueryRelation, InvalidRelation, Relation, SourceDataset


def test_fixture_relation_loaded(sales):
    assert sales.dataset_name == "sales"
    assert sales.source_dataset.project == "analytics"
    assert sales.columns == frozenset({"id", "amount"})
    assert sales.is_valid()
    assert sales.get_validation_error() is None


def test_duplicate_columns_collapse(customers):
    assert len(customers.columns) == 4
    assert customers.column_names == ["Last Name", "customer_id", "email", "first_name"]


def test_of_builds_source_dataset():
    relation = BigQueryRelation.of("sales", ("id", "id", "amount"), project="p")
    assert relation.source_dataset == SourceDataset(dataset_name="sales", project="p")
    assert relation.columns == frozenset({"id", "amount"})


def test_has_column_is_case_sensitive(sales):
    assert sales.has_column("amount")
    assert not sales.has_column("AMOUNT")
    assert not sales.has_column("region")


def test_relation_is_immutable(sales):
    with pytest.raises(pydantic.ValidationError):
        sales.columns = frozenset({"x"})  # type: ignore[misc]


def test_relation_rejects_extra_fields():
    with pytest.raises(pydantic.ValidationError):
        BigQueryRelation.model_validate(
            {
                "source_dataset": {"dataset_name": "sales"},
                "columns": ["id"],
                "alias": "s",
            }
        )


def test_invalid_relation(rejected):
    assert isinstance(rejected, Relation)
    assert not isinstance(rejected, BigQueryRelation)
    assert not rejected.is_valid()
    assert rejected.get_validation_error() == "Join condition references unknown input"


def test_invalid_relation_requires_message():
    with pytest.raises(pydantic.ValidationError):
        InvalidRelation(validation_error="")
