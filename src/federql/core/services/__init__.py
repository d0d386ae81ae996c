"""Domain services for federql."""

from federql.core.services.directive_parser import (
    FEDERATION_DIRECTIVES_SDL,
    DirectiveParser,
    SchemaDirectives,
    get_federation_directives_sdl,
)
from federql.core.services.entities_resolver import EntitiesResolver, EntitiesResult
from federql.core.services.entity_discovery import EntityDiscovery
from federql.core.services.entity_union import (
    ENTITY_UNION_NAME,
    EntityUnionBuilder,
    EntityUnionType,
    relax_entity_union_validation,
    resolve_entity_type,
)
from federql.core.services.schema_federator import SchemaFederator

__all__ = [
    # Directive parsing
    "DirectiveParser",
    "SchemaDirectives",
    "FEDERATION_DIRECTIVES_SDL",
    "get_federation_directives_sdl",
    # Entities
    "EntityDiscovery",
    "EntityUnionBuilder",
    "EntityUnionType",
    "ENTITY_UNION_NAME",
    "relax_entity_union_validation",
    "resolve_entity_type",
    "EntitiesResolver",
    "EntitiesResult",
    # Schema
    "SchemaFederator",
]
