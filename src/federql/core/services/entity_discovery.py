"""Discovery of the entities of a schema.

An object type is an entity when it carries at least one ``@key``. An
interface carrying ``@key`` is an entity only when every object type
implementing it is an entity too; otherwise the schema cannot be
composed and a CompositionError is raised.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from graphql import (
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLSchema,
    is_interface_type,
    is_object_type,
)

from federql.core.entities.directive import has_key_directive
from federql.core.entities.entity import EntityDefinition, EntityResolver
from federql.core.errors import CompositionError
from federql.core.interfaces.directive_source import IDirectiveSource

logger = logging.getLogger(__name__)

# Extensions keys holding resolvers bound to a GraphQL type
RESOLVE_REFERENCES_KEY = "resolve_references"
RESOLVE_REFERENCE_KEY = "resolve_reference"

ResolverSpec = EntityResolver | Callable[..., Any]


class EntityDiscovery:
    """Classifies the types of a schema into entities."""

    def __init__(
        self,
        directives: IDirectiveSource,
        resolvers: Mapping[str, ResolverSpec] | None = None,
        fallback_resolvers: Mapping[str, EntityResolver] | None = None,
    ) -> None:
        """Initialize entity discovery.

        Args:
            directives: Directive source for the schema's members.
            resolvers: Explicit resolvers by type name. A bare callable
                is taken as a per-reference resolver.
            fallback_resolvers: Resolvers used when neither ``resolvers``
                nor the type's extensions provide one.
        """
        self._directives = directives
        self._resolvers = dict(resolvers or {})
        self._fallback_resolvers = dict(fallback_resolvers or {})

    def discover(self, schema: GraphQLSchema) -> tuple[EntityDefinition, ...]:
        """Discover the entities of a schema.

        Args:
            schema: The finalized graphql-core schema.

        Returns:
            Object entities in type map order, followed by valid interface
            entities in type map order. Empty when the schema has none.

        Raises:
            CompositionError: If an interface with ``@key`` has an
                implementing object type without ``@key``.
        """
        object_entities: list[GraphQLNamedType] = []
        candidates: list[GraphQLInterfaceType] = []

        for type_name, type_def in schema.type_map.items():
            if type_name.startswith("__"):
                continue
            if not has_key_directive(self._directives.for_type(type_name)):
                continue
            if is_object_type(type_def):
                object_entities.append(type_def)
            elif is_interface_type(type_def):
                candidates.append(type_def)

        entity_names = {type_def.name for type_def in object_entities}
        interface_entities: list[GraphQLNamedType] = []
        for interface in candidates:
            implementers = schema.get_implementations(interface).objects
            offending = [
                implementer.name
                for implementer in implementers
                if implementer.name not in entity_names
            ]
            if offending:
                raise CompositionError(interface.name, offending)
            interface_entities.append(interface)

        entities = tuple(
            self._define(type_def) for type_def in (*object_entities, *interface_entities)
        )
        logger.debug(
            "Discovered %d entities (%d interfaces)",
            len(entities),
            len(interface_entities),
        )
        return entities

    def _define(self, type_def: Any) -> EntityDefinition:
        return EntityDefinition(
            graphql_type=type_def,
            resolver=self._select_resolver(type_def),
            keys=tuple(
                directive.argument("fields")
                for directive in self._directives.for_type(type_def.name)
                if directive.is_key
            ),
        )

    def _select_resolver(self, type_def: Any) -> EntityResolver:
        """Select the resolver capability of an entity type.

        Resolution order (first match wins):
        1. Explicit resolver passed to discovery
        2. Batch resolver in the type's extensions
        3. Per-reference resolver in the type's extensions
        4. Fallback resolver (decorator registry)
        5. Passthrough

        Args:
            type_def: The entity type.

        Returns:
            The selected EntityResolver.
        """
        explicit = self._resolvers.get(type_def.name)
        if explicit is not None:
            if isinstance(explicit, EntityResolver):
                return explicit
            return EntityResolver.per_reference(explicit)

        extensions = type_def.extensions or {}
        if extensions.get(RESOLVE_REFERENCES_KEY) is not None:
            return EntityResolver.batch(extensions[RESOLVE_REFERENCES_KEY])
        if extensions.get(RESOLVE_REFERENCE_KEY) is not None:
            return EntityResolver.per_reference(extensions[RESOLVE_REFERENCE_KEY])

        fallback = self._fallback_resolvers.get(type_def.name)
        if fallback is not None:
            return fallback

        return EntityResolver.passthrough()
