"""Shared pytest fixtures for pushQL unit tests."""
from __future__ import annotations

import pytest

from pushql.factory import SQLExpressionFactory
from pushql.relation import BigQueryRelation, InvalidRelation
from tests.fixtures import load_relations

RELATIONS = load_relations()


@pytest.fixture(scope="session")
def factory() -> SQLExpressionFactory:
    """BigQuery factory shared across all tests."""
    return SQLExpressionFactory()


@pytest.fixture(scope="session")
def sales() -> BigQueryRelation:
    """``sales {id, amount}``."""
    return RELATIONS["sales"]


@pytest.fixture(scope="session")
def customers() -> BigQueryRelation:
    return RELATIONS["customers"]


@pytest.fixture(scope="session")
def rejected() -> InvalidRelation:
    return InvalidRelation(validation_error="Join condition references unknown input")
