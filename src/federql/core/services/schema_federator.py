"""Turns a graphql-core schema into a federation subgraph schema."""

import logging
from collections.abc import Mapping

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    print_schema,
)

from federql.core.entities.entity import EntityResolver
from federql.core.entities.federation_config import FederationConfig
from federql.core.errors import ENTITIES_FIELD_NAME, FederationError
from federql.core.interfaces.synchronizer import IValueSynchronizer
from federql.core.services.directive_parser import DirectiveParser
from federql.core.services.entities_resolver import EntitiesResolver
from federql.core.services.entity_discovery import EntityDiscovery, ResolverSpec
from federql.core.services.entity_union import (
    EntityUnionBuilder,
    relax_entity_union_validation,
)
from federql.core.services.federation_types import (
    build_any_scalar,
    build_service_field,
    build_service_type,
)

logger = logging.getLogger(__name__)

SERVICE_FIELD_NAME = "_service"
FEDERATION_QUERY_FIELDS = (ENTITIES_FIELD_NAME, SERVICE_FIELD_NAME)


class SchemaFederator:
    """Adds the federation fields and types to a schema.

    Runs directive parsing, entity discovery and union building once,
    and wires an EntitiesResolver as the ``_entities`` resolver.
    """

    def __init__(
        self,
        synchronizer: IValueSynchronizer,
        config: FederationConfig | None = None,
        fallback_resolvers: Mapping[str, EntityResolver] | None = None,
    ) -> None:
        """Initialize the federator.

        Args:
            synchronizer: Synchronizer used by the entities resolver.
            config: Optional federation configuration.
            fallback_resolvers: Resolvers used for entity types that have
                no explicit or bound resolver.
        """
        self._synchronizer = synchronizer
        self._config = config or FederationConfig()
        self._fallback_resolvers = fallback_resolvers

    @property
    def config(self) -> FederationConfig:
        return self._config

    def federate(
        self,
        schema: GraphQLSchema,
        resolvers: Mapping[str, ResolverSpec] | None = None,
    ) -> GraphQLSchema:
        """Build the subgraph schema.

        The types of ``schema`` are modified in place: its query type gets
        the federation fields and the field resolvers of object entities
        are wrapped. ``schema`` itself should not be used afterwards.

        Args:
            schema: The finalized schema to federate.
            resolvers: Explicit entity resolvers by type name.

        Returns:
            A new schema whose query type hosts ``_service`` and, when the
            schema has entities, ``_entities``.

        Raises:
            CompositionError: If an interface entity is not valid.
            FederationError: If the schema already has federation fields,
                or has no query type and a type already has the name of
                the query type to create.
        """
        query_type = schema.query_type
        if query_type is not None:
            existing = [name for name in FEDERATION_QUERY_FIELDS if name in query_type.fields]
            if existing:
                raise FederationError(
                    f"Query type {query_type.name} already defines {', '.join(existing)}"
                )
        elif schema.get_type(self._config.query_type_name) is not None:
            raise FederationError(
                f"Cannot add query type {self._config.query_type_name}: "
                "a type of that name already exists"
            )

        directives = DirectiveParser().parse_schema(schema)
        entities = EntityDiscovery(
            directives,
            resolvers=resolvers,
            fallback_resolvers=self._fallback_resolvers,
        ).discover(schema)

        federation_fields: dict[str, GraphQLField] = {}
        extra_types = []

        if entities:
            entity_union = EntityUnionBuilder().build(entities)
            any_scalar = build_any_scalar(self._config.underscore_keys)
            entities_resolver = EntitiesResolver(
                entities, self._synchronizer, debug=self._config.debug
            )
            federation_fields[ENTITIES_FIELD_NAME] = GraphQLField(
                GraphQLNonNull(GraphQLList(entity_union)),
                args={
                    "representations": GraphQLArgument(
                        GraphQLNonNull(GraphQLList(GraphQLNonNull(any_scalar)))
                    )
                },
                resolve=entities_resolver,
            )
            extra_types.extend([entity_union, any_scalar])

        if self._config.include_service_field:
            service_type = build_service_type()
            sdl = self._config.service_sdl
            if sdl is None:
                sdl = print_schema(schema)
            federation_fields[SERVICE_FIELD_NAME] = build_service_field(
                service_type, lambda: sdl
            )
            extra_types.append(service_type)

        if query_type is None:
            query_type = GraphQLObjectType(
                self._config.query_type_name, fields=federation_fields
            )
        else:
            # Extended in place so fields referencing the query type keep
            # pointing at the schema's query type
            query_type.fields.update(federation_fields)

        types = [
            type_def
            for name, type_def in schema.type_map.items()
            if not name.startswith("__")
        ]
        kwargs = schema.to_kwargs()
        kwargs.update(
            query=query_type,
            types=[*types, *extra_types],
            assume_valid=False,
        )
        federated = GraphQLSchema(**kwargs)

        relax_entity_union_validation(
            federated, [entity.name for entity in entities if entity.is_interface]
        )
        logger.info(
            "Federated schema with %d entities: %s",
            len(entities),
            ", ".join(entity.name for entity in entities) or "none",
        )
        return federated
