"""Tests for DirectiveParser and SchemaDirectives."""

from ariadne import make_executable_schema
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from federql.core.entities.directive import FederationDirective
from federql.core.services.directive_parser import (
    FEDERATION_DIRECTIVES_SDL,
    DirectiveParser,
    SchemaDirectives,
    get_federation_directives_sdl,
)


def build_schema(type_defs: str) -> GraphQLSchema:
    return make_executable_schema([FEDERATION_DIRECTIVES_SDL, type_defs])


class TestGetFederationDirectivesSdl:
    """Tests for get_federation_directives_sdl function."""

    def test_returns_directive_definitions(self):
        sdl = get_federation_directives_sdl()
        assert "directive @key(fields: _FieldSet!" in sdl
        assert "repeatable on OBJECT | INTERFACE" in sdl
        assert "directive @external" in sdl
        assert "directive @requires" in sdl
        assert "directive @provides" in sdl
        assert "scalar _FieldSet" in sdl

    def test_matches_constant(self):
        assert get_federation_directives_sdl() == FEDERATION_DIRECTIVES_SDL


class TestSchemaDirectives:
    """Tests for SchemaDirectives class."""

    def test_empty_directives(self):
        directives = SchemaDirectives()
        assert directives.for_type("User") == ()
        assert directives.for_field("User", "id") == ()
        assert directives.for_argument("Query", "user", "id") == ()

    def test_entity_keys(self):
        directives = SchemaDirectives(
            type_directives={
                "User": (
                    FederationDirective.key("id"),
                    FederationDirective.shareable(),
                    FederationDirective.key("email"),
                )
            }
        )
        assert directives.entity_keys("User") == ("id", "email")
        assert directives.entity_keys("Missing") == ()


class TestDirectiveParser:
    """Tests for DirectiveParser class."""

    def test_parses_type_directives(self):
        schema = build_schema(
            """
            type Query { product: Product }
            type Product @key(fields: "upc") @key(fields: "sku") {
                upc: String!
                sku: String!
            }
            """
        )

        directives = DirectiveParser().parse_schema(schema)

        assert directives.for_type("Product") == (
            FederationDirective("key", (("fields", "upc"),)),
            FederationDirective("key", (("fields", "sku"),)),
        )
        assert directives.entity_keys("Product") == ("upc", "sku")

    def test_keeps_argument_order(self):
        schema = build_schema(
            """
            type Query { product: Product }
            type Product @key(resolvable: false, fields: "upc") { upc: String! }
            """
        )

        directives = DirectiveParser().parse_schema(schema)

        assert directives.for_type("Product")[0].arguments == (
            ("resolvable", False),
            ("fields", "upc"),
        )

    def test_parses_field_directives(self):
        schema = build_schema(
            """
            type Query { product: Product }
            type Product @key(fields: "upc") {
                upc: String! @external
                weight: Int @external
                shippingEstimate: Int @requires(fields: "weight")
                name: String @shareable @tag(name: "public")
            }
            """
        )

        directives = DirectiveParser().parse_schema(schema)

        assert directives.for_field("Product", "upc") == (FederationDirective.external(),)
        assert directives.for_field("Product", "shippingEstimate") == (
            FederationDirective.requires("weight"),
        )
        assert directives.for_field("Product", "name") == (
            FederationDirective.shareable(),
            FederationDirective.tag("public"),
        )

    def test_parses_argument_directives(self):
        schema = build_schema(
            """
            type Query {
                product(upc: String @inaccessible): String
            }
            """
        )

        directives = DirectiveParser().parse_schema(schema)

        assert directives.for_argument("Query", "product", "upc") == (
            FederationDirective.inaccessible(),
        )

    def test_ignores_other_directives(self):
        schema = build_schema(
            """
            directive @custom on OBJECT
            type Query { product: Product }
            type Product @custom @key(fields: "upc") {
                upc: String! @deprecated(reason: "old")
            }
            """
        )

        directives = DirectiveParser().parse_schema(schema)

        assert [d.name for d in directives.for_type("Product")] == ["key"]
        assert directives.for_field("Product", "upc") == ()

    def test_reads_programmatic_directives_first(self):
        product = GraphQLObjectType(
            "Product",
            fields={
                "upc": GraphQLField(
                    GraphQLString,
                    extensions={
                        "federation_directives": (FederationDirective.external(),)
                    },
                ),
                "name": GraphQLField(
                    GraphQLString,
                    args={
                        "locale": GraphQLArgument(
                            GraphQLString,
                            extensions={
                                "federation_directives": (
                                    FederationDirective.tag("i18n"),
                                )
                            },
                        )
                    },
                ),
            },
            extensions={"federation_directives": (FederationDirective.key("upc"),)},
        )
        query = GraphQLObjectType("Query", {"product": GraphQLField(product)})
        schema = GraphQLSchema(query=query)

        directives = DirectiveParser().parse_schema(schema)

        assert directives.for_type("Product") == (FederationDirective.key("upc"),)
        assert directives.for_field("Product", "upc") == (FederationDirective.external(),)
        assert directives.for_argument("Product", "name", "locale") == (
            FederationDirective.tag("i18n"),
        )

    def test_custom_directive_names(self):
        schema = build_schema(
            """
            directive @custom(level: Int) on OBJECT
            type Query { product: Product }
            type Product @custom(level: 3) @key(fields: "upc") { upc: String! }
            """
        )

        directives = DirectiveParser(frozenset({"custom"})).parse_schema(schema)

        assert directives.for_type("Product") == (
            FederationDirective("custom", (("level", 3),)),
        )

    def test_skips_introspection_types(self):
        schema = build_schema("type Query { hello: String }")

        directives = DirectiveParser().parse_schema(schema)

        assert not any(name.startswith("__") for name in directives.type_directives)
