"""Test fixtures: sample relations as JSON."""

from __future__ import annotations

import json
from pathlib import Path

from pushql.relation import BigQueryRelation

_FIXTURES_DIR = Path(__file__).parent


def load_relations() -> dict[str, BigQueryRelation]:
    """Load the sample relations from relations.json, keyed by name."""
    data = json.loads((_FIXTURES_DIR / "relations.json").read_text())
    return {name: BigQueryRelation.model_validate(raw) for name, raw in data.items()}
