"""Subgraph schema construction with Ariadne."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from ariadne import make_executable_schema
from graphql import GraphQLSchema

from federql.core.entities.federation_config import FederationConfig
from federql.core.services.directive_parser import FEDERATION_DIRECTIVES_SDL
from federql.core.services.entity_discovery import ResolverSpec
from federql.schema import federate_schema


def make_subgraph_schema(
    type_defs: str | list[str],
    *bindables: Any,
    config: FederationConfig | None = None,
    resolvers: Mapping[str, ResolverSpec] | None = None,
    **kwargs: Any,
) -> GraphQLSchema:
    """Build an executable subgraph schema from SDL.

    Federation directive definitions are added to ``type_defs`` unless
    they already define ``@key``. The original ``type_defs`` are served
    as the ``_service`` SDL when the config does not set one.

    Args:
        type_defs: SDL type definitions, as a string or a list of strings.
        *bindables: Ariadne bindables, including EntityObjectType
            instances.
        config: Optional federation configuration.
        resolvers: Explicit entity resolvers by type name.
        **kwargs: Passed on to ``make_executable_schema``.

    Returns:
        The subgraph schema.

    Example::

        type_defs = '''
            type Query { topProducts: [Product!]! }
            type Product @key(fields: "upc") { upc: String! name: String }
        '''
        product = EntityObjectType("Product")

        @product.reference_resolver
        def resolve_product(reference, info):
            return PRODUCTS.get(reference["upc"])

        schema = make_subgraph_schema(type_defs, query, product)
    """
    if isinstance(type_defs, str):
        type_defs = [type_defs]
    sdl = "\n".join(type_defs)

    if "directive @key" not in sdl:
        type_defs = [FEDERATION_DIRECTIVES_SDL, *type_defs]

    schema = make_executable_schema(type_defs, *bindables, **kwargs)

    config = config or FederationConfig()
    if config.service_sdl is None:
        config = replace(config, service_sdl=sdl)

    return federate_schema(schema, config=config, resolvers=resolvers)
