"""Ariadne framework adapter for federql."""

from federql.adapters.ariadne.objects import EntityObjectType
from federql.adapters.ariadne.schema import make_subgraph_schema

__all__ = [
    "EntityObjectType",
    "make_subgraph_schema",
]
