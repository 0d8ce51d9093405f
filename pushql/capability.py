"""Capability tags advertised by expression factories.

A planner asks a factory for its capabilities and only delegates work that
the factory can compile.  Tags are plain hashable values so they can be
collected in sets and compared across factories.
"""
from __future__ import annotations

from enum import Enum


class Capability:
    """Marker base for anything a factory can advertise."""


class ExpressionFactoryType(Capability, str, Enum):
    """Expression languages a factory can produce.

    Members compare equal to their string value, so ``"SQL"`` and
    ``ExpressionFactoryType.SQL`` are interchangeable in lookups.
    """

    SQL = "SQL"

    def __str__(self) -> str:
        return self.value
