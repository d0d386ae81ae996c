"""federql - Apollo Federation subgraph support for graphql-core schemas.

Exposes the entities of a schema to a federation gateway: discovers the
types carrying ``@key``, builds the ``_Entity`` union and resolves
``_entities`` representations in batches, sync or async, with
per-representation error isolation.

Example with Ariadne:
    from ariadne import QueryType
    from federql.adapters.ariadne import EntityObjectType, make_subgraph_schema

    type_defs = '''
        type Query {
            topProducts: [Product!]!
        }

        type Product @key(fields: "upc") {
            upc: String!
            name: String
        }
    '''

    query = QueryType()
    product = EntityObjectType("Product")

    @product.references_resolver
    async def resolve_products(references, info):
        upcs = [reference["upc"] for reference in references]
        products = await load_products(upcs)
        return [products.get(upc) for upc in upcs]

    schema = make_subgraph_schema(type_defs, query, product)

With a schema built by other means:
    from federql import FederationDirective, federate_schema

    product_type = GraphQLObjectType(
        "Product",
        fields={"upc": GraphQLField(GraphQLString)},
        extensions={"federation_directives": (FederationDirective.key("upc"),)},
    )
    schema = federate_schema(GraphQLSchema(query=..., types=[product_type]))
"""

from federql.core.entities import (
    EntityDefinition,
    EntityResolver,
    EntityResolverKind,
    FederationConfig,
    FederationDirective,
    ResolvedEntity,
    inherit_directives,
)
from federql.core.errors import (
    CompositionError,
    EntityResolutionError,
    FederationError,
    IncoercibleAnyTypeError,
    UnknownEntityTypeError,
)
from federql.core.interfaces import (
    IDirectiveSource,
    IReferenceResolver,
    IReferencesResolver,
    IValueSynchronizer,
)
from federql.core.services import (
    ENTITY_UNION_NAME,
    FEDERATION_DIRECTIVES_SDL,
    DirectiveParser,
    EntitiesResolver,
    EntitiesResult,
    EntityDiscovery,
    EntityUnionBuilder,
    EntityUnionType,
    SchemaDirectives,
    SchemaFederator,
    get_federation_directives_sdl,
)
from federql.decorators import (
    clear_registered_resolvers,
    get_registered_resolvers,
    reference_resolver,
    references_resolver,
)
from federql.infrastructure import AwaitableSynchronizer
from federql.schema import federate_schema
from federql.utils import serialize_field_set

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Entry point
    "federate_schema",
    # Core entities
    "EntityDefinition",
    "EntityResolver",
    "EntityResolverKind",
    "FederationConfig",
    "FederationDirective",
    "ResolvedEntity",
    "inherit_directives",
    # Errors
    "FederationError",
    "CompositionError",
    "UnknownEntityTypeError",
    "EntityResolutionError",
    "IncoercibleAnyTypeError",
    # Core interfaces
    "IDirectiveSource",
    "IReferenceResolver",
    "IReferencesResolver",
    "IValueSynchronizer",
    # Directive parsing
    "DirectiveParser",
    "SchemaDirectives",
    "FEDERATION_DIRECTIVES_SDL",
    "get_federation_directives_sdl",
    # Core services
    "EntityDiscovery",
    "EntityUnionBuilder",
    "EntityUnionType",
    "ENTITY_UNION_NAME",
    "EntitiesResolver",
    "EntitiesResult",
    "SchemaFederator",
    # Infrastructure implementations
    "AwaitableSynchronizer",
    # Decorators
    "reference_resolver",
    "references_resolver",
    "get_registered_resolvers",
    "clear_registered_resolvers",
    # Utils
    "serialize_field_set",
]
