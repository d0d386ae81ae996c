"""Domain entities for federql."""

from federql.core.entities.directive import (
    KEY_DIRECTIVE,
    FederationDirective,
    has_key_directive,
    inherit_directives,
)
from federql.core.entities.entity import (
    EntityDefinition,
    EntityResolver,
    EntityResolverKind,
    EntityType,
    Reference,
    ResolvedEntity,
)
from federql.core.entities.federation_config import FederationConfig

__all__ = [
    "KEY_DIRECTIVE",
    "FederationDirective",
    "has_key_directive",
    "inherit_directives",
    "EntityDefinition",
    "EntityResolver",
    "EntityResolverKind",
    "EntityType",
    "Reference",
    "ResolvedEntity",
    "FederationConfig",
]
