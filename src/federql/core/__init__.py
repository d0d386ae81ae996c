"""Core domain layer for federql."""

from federql.core.entities import (
    EntityDefinition,
    EntityResolver,
    EntityResolverKind,
    FederationConfig,
    FederationDirective,
    ResolvedEntity,
)
from federql.core.errors import (
    CompositionError,
    EntityResolutionError,
    FederationError,
    IncoercibleAnyTypeError,
    UnknownEntityTypeError,
)
from federql.core.interfaces import IDirectiveSource, IValueSynchronizer
from federql.core.services import EntitiesResolver, SchemaFederator

__all__ = [
    # Entities
    "EntityDefinition",
    "EntityResolver",
    "EntityResolverKind",
    "FederationConfig",
    "FederationDirective",
    "ResolvedEntity",
    # Errors
    "FederationError",
    "CompositionError",
    "UnknownEntityTypeError",
    "EntityResolutionError",
    "IncoercibleAnyTypeError",
    # Interfaces
    "IDirectiveSource",
    "IValueSynchronizer",
    # Services
    "EntitiesResolver",
    "SchemaFederator",
]
