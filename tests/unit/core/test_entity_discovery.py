"""Tests for EntityDiscovery."""

import pytest
from ariadne import make_executable_schema
from graphql import GraphQLSchema

from federql.core.entities.entity import EntityResolver, EntityResolverKind
from federql.core.errors import CompositionError
from federql.core.services.directive_parser import (
    FEDERATION_DIRECTIVES_SDL,
    DirectiveParser,
)
from federql.core.services.entity_discovery import EntityDiscovery

PRODUCT_TYPE_DEFS = """
    type Query { product: Product }

    interface Product @key(fields: "id") {
        id: ID!
        title: String
    }

    type Book implements Product @key(fields: "id") {
        id: ID!
        title: String
        pages: Int
    }

    type Movie implements Product @key(fields: "id") {
        id: ID!
        title: String
        minutes: Int
    }
"""


def build_schema(type_defs: str) -> GraphQLSchema:
    return make_executable_schema([FEDERATION_DIRECTIVES_SDL, type_defs])


def discover(schema: GraphQLSchema, **kwargs):
    directives = DirectiveParser().parse_schema(schema)
    return EntityDiscovery(directives, **kwargs).discover(schema)


class TestObjectEntities:
    """Tests for object entity discovery."""

    def test_no_entities(self):
        schema = build_schema("type Query { hello: String } type Plain { id: ID }")
        assert discover(schema) == ()

    def test_discovers_types_with_key(self):
        schema = build_schema(
            """
            type Query { user: User }
            type User @key(fields: "id") { id: ID! }
            type Review { body: String }
            type Product @key(fields: "upc") @key(fields: "sku") {
                upc: String!
                sku: String!
            }
            """
        )

        entities = discover(schema)

        assert [entity.name for entity in entities] == ["User", "Product"]
        assert entities[1].keys == ("upc", "sku")

    def test_ignores_types_with_other_directives_only(self):
        schema = build_schema(
            """
            type Query { user: User }
            type User @shareable { id: ID! }
            """
        )
        assert discover(schema) == ()


class TestInterfaceEntities:
    """Tests for interface entity discovery."""

    def test_promotes_interface_when_all_implementers_are_entities(self):
        entities = discover(build_schema(PRODUCT_TYPE_DEFS))

        assert [entity.name for entity in entities] == ["Book", "Movie", "Product"]
        assert [entity.is_interface for entity in entities] == [False, False, True]

    def test_interface_without_key_is_not_an_entity(self):
        schema = build_schema(
            """
            type Query { node: Node }
            interface Node { id: ID! }
            type User implements Node @key(fields: "id") { id: ID! }
            """
        )

        assert [entity.name for entity in discover(schema)] == ["User"]

    def test_rejects_interface_with_non_entity_implementer(self):
        schema = build_schema(
            """
            type Query { node: Node }
            interface Node @key(fields: "id") { id: ID! }
            type A implements Node @key(fields: "id") { id: ID! }
            type B implements Node { id: ID! }
            """
        )

        with pytest.raises(CompositionError) as exc_info:
            discover(schema)

        error = exc_info.value
        assert error.interface_name == "Node"
        assert error.offending_types == ("B",)
        assert str(error) == (
            "Interface Node is not valid. Types `B` do not have a @key directive. "
            "All types that implement an interface with a @key directive must "
            "also have a @key directive."
        )

    def test_names_every_offending_implementer_in_order(self):
        schema = build_schema(
            """
            type Query { node: Node }
            interface Node @key(fields: "id") { id: ID! }
            type C implements Node { id: ID! }
            type A implements Node @key(fields: "id") { id: ID! }
            type B implements Node { id: ID! }
            """
        )

        with pytest.raises(CompositionError, match="Types `C`, `B` do not have"):
            discover(schema)


class TestResolverSelection:
    """Tests for resolver capability selection."""

    @pytest.fixture
    def schema(self) -> GraphQLSchema:
        return build_schema(
            """
            type Query { user: User }
            type User @key(fields: "id") { id: ID! }
            """
        )

    def test_passthrough_by_default(self, schema: GraphQLSchema):
        (entity,) = discover(schema)
        assert entity.resolver.kind is EntityResolverKind.NONE

    def test_explicit_resolver(self, schema: GraphQLSchema):
        def resolve_users(references, info):
            return references

        (entity,) = discover(
            schema, resolvers={"User": EntityResolver.batch(resolve_users)}
        )

        assert entity.resolver == EntityResolver.batch(resolve_users)

    def test_bare_callable_is_per_reference(self, schema: GraphQLSchema):
        def resolve_user(reference, info):
            return reference

        (entity,) = discover(schema, resolvers={"User": resolve_user})

        assert entity.resolver == EntityResolver.per_reference(resolve_user)

    def test_batch_extension_wins_over_per_reference(self, schema: GraphQLSchema):
        def resolve_user(reference, info):
            return reference

        def resolve_users(references, info):
            return references

        schema.type_map["User"].extensions = {
            "resolve_reference": resolve_user,
            "resolve_references": resolve_users,
        }

        (entity,) = discover(schema)

        assert entity.resolver == EntityResolver.batch(resolve_users)

    def test_per_reference_extension(self, schema: GraphQLSchema):
        def resolve_user(reference, info):
            return reference

        schema.type_map["User"].extensions = {"resolve_reference": resolve_user}

        (entity,) = discover(schema)

        assert entity.resolver == EntityResolver.per_reference(resolve_user)

    def test_explicit_wins_over_extensions(self, schema: GraphQLSchema):
        def from_extensions(reference, info):
            return reference

        def explicit(reference, info):
            return reference

        schema.type_map["User"].extensions = {"resolve_reference": from_extensions}

        (entity,) = discover(schema, resolvers={"User": explicit})

        assert entity.resolver.fn is explicit

    def test_fallback_resolver(self, schema: GraphQLSchema):
        def registered(reference, info):
            return reference

        (entity,) = discover(
            schema,
            fallback_resolvers={"User": EntityResolver.per_reference(registered)},
        )

        assert entity.resolver.fn is registered
