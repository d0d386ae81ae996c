"""GraphQL types added to a schema by federation: ``_Any`` and ``_Service``."""

from collections.abc import Callable, Mapping
from typing import Any

from ariadne.utils import convert_camel_case_to_snake
from graphql import (
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLString,
)
from graphql.utilities import value_from_ast_untyped

from federql.core.errors import IncoercibleAnyTypeError

ANY_SCALAR_NAME = "_Any"
SERVICE_TYPE_NAME = "_Service"
TYPENAME_KEY = "__typename"


def coerce_representation(value: Any, underscore_keys: bool = False) -> dict[str, Any]:
    """Coerce an input value to a representation.

    Args:
        value: The input value.
        underscore_keys: Convert camelCase keys to snake_case.
            ``__typename`` is never converted.

    Returns:
        A new dict with the representation's keys.

    Raises:
        IncoercibleAnyTypeError: If the value is not an object with a
            string ``__typename``.
    """
    if not isinstance(value, Mapping) or not isinstance(value.get(TYPENAME_KEY), str):
        raise IncoercibleAnyTypeError(value)

    if not underscore_keys:
        return dict(value)

    return {
        key if key == TYPENAME_KEY else convert_camel_case_to_snake(key): item
        for key, item in value.items()
    }


def build_any_scalar(underscore_keys: bool = False) -> GraphQLScalarType:
    """Build the ``_Any`` scalar carrying entity representations.

    Args:
        underscore_keys: Convert camelCase keys of inputs to snake_case.

    Returns:
        The scalar type.
    """

    def parse_value(value: Any) -> dict[str, Any]:
        return coerce_representation(value, underscore_keys)

    def parse_literal(value_node: Any, variables: Any = None) -> dict[str, Any]:
        return parse_value(value_from_ast_untyped(value_node, variables))

    return GraphQLScalarType(
        ANY_SCALAR_NAME,
        serialize=lambda value: value,
        parse_value=parse_value,
        parse_literal=parse_literal,
    )


def build_service_type() -> GraphQLObjectType:
    return GraphQLObjectType(
        SERVICE_TYPE_NAME,
        fields={"sdl": GraphQLField(GraphQLString)},
        description=(
            "The sdl representing the federated service capabilities. Includes "
            "federation directives, removes federation types, and includes rest "
            "of full schema after schema directives have been applied"
        ),
    )


def build_service_field(
    service_type: GraphQLObjectType, sdl: Callable[[], str]
) -> GraphQLField:
    """Build the ``_service`` query field.

    Args:
        service_type: The ``_Service`` type.
        sdl: Callable returning the SDL of the service.

    Returns:
        The field, resolving to ``{"sdl": sdl()}``.
    """
    return GraphQLField(
        GraphQLNonNull(service_type),
        resolve=lambda _root, _info: {"sdl": sdl()},
    )
