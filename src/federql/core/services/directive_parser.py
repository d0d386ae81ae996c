"""Parser for federation directives in GraphQL schemas.

Extracts ``@key``, ``@external`` and the other federation directives
declared on types, fields and arguments of a graphql-core schema.
Directives may be declared programmatically, through the member's
``extensions["federation_directives"]``, or in SDL.
"""

from dataclasses import dataclass, field
from typing import Any

from graphql import (
    GraphQLSchema,
    is_input_object_type,
    is_interface_type,
    is_object_type,
)
from graphql.utilities import value_from_ast_untyped

from federql.core.entities.directive import KEY_DIRECTIVE, FederationDirective

# Extensions key for programmatically declared directives
FEDERATION_DIRECTIVES_KEY = "federation_directives"

FEDERATION_DIRECTIVE_NAMES = frozenset(
    {
        KEY_DIRECTIVE,
        "external",
        "requires",
        "provides",
        "extends",
        "shareable",
        "inaccessible",
        "override",
        "tag",
    }
)

# Definitions to add to SDL-first schemas so federation directives validate
FEDERATION_DIRECTIVES_SDL = '''
scalar _FieldSet

directive @key(fields: _FieldSet!, resolvable: Boolean = true) repeatable on OBJECT | INTERFACE
directive @requires(fields: _FieldSet!) on FIELD_DEFINITION
directive @provides(fields: _FieldSet!) on FIELD_DEFINITION
directive @external on OBJECT | FIELD_DEFINITION
directive @extends on OBJECT | INTERFACE
directive @shareable repeatable on OBJECT | FIELD_DEFINITION
directive @inaccessible on FIELD_DEFINITION | OBJECT | INTERFACE | UNION | ARGUMENT_DEFINITION | SCALAR | ENUM | ENUM_VALUE | INPUT_OBJECT | INPUT_FIELD_DEFINITION
directive @override(from: String!) on FIELD_DEFINITION
directive @tag(name: String!) repeatable on FIELD_DEFINITION | OBJECT | INTERFACE | UNION | ARGUMENT_DEFINITION | SCALAR | ENUM | ENUM_VALUE | INPUT_OBJECT | INPUT_FIELD_DEFINITION
'''

Directives = tuple[FederationDirective, ...]


@dataclass
class SchemaDirectives:
    """Extracted federation directives of a schema.

    Stores type-level, field-level and argument-level directives.
    """

    # type_name -> directives
    type_directives: dict[str, Directives] = field(default_factory=dict)

    # "TypeName.fieldName" -> directives
    field_directives: dict[str, Directives] = field(default_factory=dict)

    # "TypeName.fieldName(argName:)" -> directives
    argument_directives: dict[str, Directives] = field(default_factory=dict)

    def for_type(self, type_name: str) -> Directives:
        return self.type_directives.get(type_name, ())

    def for_field(self, type_name: str, field_name: str) -> Directives:
        return self.field_directives.get(f"{type_name}.{field_name}", ())

    def for_argument(
        self, type_name: str, field_name: str, argument_name: str
    ) -> Directives:
        return self.argument_directives.get(
            f"{type_name}.{field_name}({argument_name}:)", ()
        )

    def entity_keys(self, type_name: str) -> tuple[str, ...]:
        """Get the key field sets of a type.

        Args:
            type_name: The type name.

        Returns:
            The ``fields`` argument of each ``@key``, in declaration order.
        """
        return tuple(
            directive.argument("fields")
            for directive in self.for_type(type_name)
            if directive.is_key
        )


class DirectiveParser:
    """Parser for extracting federation directives from GraphQL schemas."""

    def __init__(self, directive_names: frozenset[str] = FEDERATION_DIRECTIVE_NAMES) -> None:
        """Initialize the directive parser.

        Args:
            directive_names: Names of the directives to extract. Other
                directives found in SDL are ignored.
        """
        self._directive_names = directive_names

    def parse_schema(self, schema: GraphQLSchema) -> SchemaDirectives:
        """Parse a GraphQL schema and extract federation directives.

        Args:
            schema: The graphql-core schema.

        Returns:
            SchemaDirectives containing all extracted directives.
        """
        directives = SchemaDirectives()

        for type_name, type_def in schema.type_map.items():
            # Skip introspection types
            if type_name.startswith("__"):
                continue

            type_directives = self.directives_of(type_def)
            if type_directives:
                directives.type_directives[type_name] = type_directives

            if not (
                is_object_type(type_def)
                or is_interface_type(type_def)
                or is_input_object_type(type_def)
            ):
                continue

            for field_name, field_def in type_def.fields.items():
                field_key = f"{type_name}.{field_name}"
                field_directives = self.directives_of(field_def)
                if field_directives:
                    directives.field_directives[field_key] = field_directives

                for arg_name, arg_def in getattr(field_def, "args", {}).items():
                    arg_directives = self.directives_of(arg_def)
                    if arg_directives:
                        arg_key = f"{field_key}({arg_name}:)"
                        directives.argument_directives[arg_key] = arg_directives

        return directives

    def directives_of(self, member: Any) -> Directives:
        """Extract the federation directives declared on a schema member.

        Programmatic directives come first, then those of the SDL
        definition, then those of each SDL extension.

        Args:
            member: A GraphQL type, field or argument.

        Returns:
            The directives in declaration order.
        """
        extensions = getattr(member, "extensions", None) or {}
        declared = tuple(extensions.get(FEDERATION_DIRECTIVES_KEY, ()))

        ast_nodes = [getattr(member, "ast_node", None)]
        ast_nodes.extend(getattr(member, "extension_ast_nodes", None) or ())

        parsed: list[FederationDirective] = []
        for ast_node in ast_nodes:
            if ast_node is None:
                continue
            for directive_node in getattr(ast_node, "directives", None) or ():
                name = directive_node.name.value
                if name in self._directive_names:
                    parsed.append(self._parse_directive_node(directive_node))

        return declared + tuple(parsed)

    def _parse_directive_node(self, directive_node: Any) -> FederationDirective:
        """Parse a directive AST node.

        Args:
            directive_node: The directive AST node.

        Returns:
            The parsed FederationDirective.
        """
        arguments = tuple(
            (arg.name.value, value_from_ast_untyped(arg.value))
            for arg in directive_node.arguments or ()
        )
        return FederationDirective(name=directive_node.name.value, arguments=arguments)


def get_federation_directives_sdl() -> str:
    """Get the SDL definitions of the federation directives.

    Add this to your type definitions to use federation directives in SDL.

    Returns:
        The SDL string with the directive definitions.
    """
    return FEDERATION_DIRECTIVES_SDL
