"""Entry point for turning a schema into a federation subgraph."""

from collections.abc import Mapping

from graphql import GraphQLSchema

from federql.core.entities.federation_config import FederationConfig
from federql.core.services.entity_discovery import ResolverSpec
from federql.core.services.schema_federator import SchemaFederator
from federql.decorators import get_registered_resolvers
from federql.infrastructure.synchronizers.awaitable import AwaitableSynchronizer


def federate_schema(
    schema: GraphQLSchema,
    config: FederationConfig | None = None,
    resolvers: Mapping[str, ResolverSpec] | None = None,
) -> GraphQLSchema:
    """Add the federation fields and types to a schema.

    Entity resolvers are taken, per type, from ``resolvers``, then from
    the type's ``extensions``, then from the decorator registry.

    The schema's types are reused and modified in place: the query type
    gains ``_service`` and ``_entities``, and the field resolvers and
    ``is_type_of`` of object entities are wrapped to accept tagged
    values. Use the returned schema; the input schema should not be
    executed afterwards.

    Args:
        schema: The schema to federate.
        config: Optional federation configuration.
        resolvers: Explicit entity resolvers by type name.

    Returns:
        The subgraph schema.

    Raises:
        CompositionError: If an interface entity is not valid.
        FederationError: If the schema already has federation fields.
    """
    federator = SchemaFederator(
        synchronizer=AwaitableSynchronizer(),
        config=config,
        fallback_resolvers=get_registered_resolvers(),
    )
    return federator.federate(schema, resolvers=resolvers)
