"""Builder for the ``_Entity`` union.

The union's members are the discovered entities, interfaces included.
GraphQL only allows object types in unions, so the schema validation
rule is relaxed for interface members of ``_Entity`` and nothing else.
"""

import functools
from collections.abc import Callable, Collection, Sequence
from typing import Any

from graphql import (
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    default_field_resolver,
    default_type_resolver,
    is_interface_type,
    is_object_type,
    validate_schema,
)
from graphql.pyutils import cached_property
from graphql.type.definition import resolve_thunk

from federql.core.entities.entity import EntityDefinition, EntityType, ResolvedEntity

ENTITY_UNION_NAME = "_Entity"

_UNWRAPPED_MARKER = "__federql_unwrapped__"


def resolve_entity_type(value: Any, info: Any, abstract_type: Any) -> Any:
    """Type resolver of the ``_Entity`` union.

    Reads the object type tag set by the entities resolver. Untagged
    values fall back to graphql-core's default type resolver.

    Args:
        value: The resolved value, normally a ResolvedEntity.
        info: The GraphQL resolve info.
        abstract_type: The ``_Entity`` union.

    Returns:
        The name of the runtime object type.
    """
    if not isinstance(value, ResolvedEntity):
        return default_type_resolver(value, info, abstract_type)
    return value.entity_type.name


class EntityUnionType(GraphQLUnionType):
    """The ``_Entity`` union.

    Unlike a plain union it takes interface entities as members, next to
    object entities.
    """

    @cached_property
    def types(self) -> list[EntityType]:  # type: ignore[override]
        try:
            types: Collection[EntityType] = resolve_thunk(self._types)
        except Exception as error:
            raise TypeError(f"{self.name} types cannot be resolved. {error}") from error
        if types is None:
            return []
        if not all(is_object_type(t) or is_interface_type(t) for t in types):
            raise TypeError(f"{self.name} types must be object or interface types.")
        return list(types)


def unwrap_source(resolver: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a field resolver so it receives untagged values.

    Args:
        resolver: The original resolver.

    Returns:
        A resolver that unwraps a ResolvedEntity source before calling
        ``resolver``. Already wrapped resolvers are returned unchanged.
    """
    if getattr(resolver, _UNWRAPPED_MARKER, False):
        return resolver

    @functools.wraps(resolver)
    def wrapper(source: Any, *args: Any, **kwargs: Any) -> Any:
        if isinstance(source, ResolvedEntity):
            source = source.value
        return resolver(source, *args, **kwargs)

    setattr(wrapper, _UNWRAPPED_MARKER, True)
    return wrapper


class EntityUnionBuilder:
    """Builds the ``_Entity`` union for a set of entities."""

    def build(self, entities: Sequence[EntityDefinition]) -> GraphQLUnionType:
        """Build the ``_Entity`` union.

        Also prepares the object entity types to receive tagged values:
        their field resolvers and ``is_type_of`` are wrapped to unwrap
        the tag.

        Args:
            entities: The discovered entities, in discovery order.

        Returns:
            The union, with members in the same order as ``entities``.

        Raises:
            ValueError: If ``entities`` is empty.
        """
        if not entities:
            raise ValueError("Cannot build the _Entity union without entities")

        for entity in entities:
            if not entity.is_interface:
                self._accept_tagged_values(entity.graphql_type)

        return EntityUnionType(
            ENTITY_UNION_NAME,
            types=[entity.graphql_type for entity in entities],
            resolve_type=resolve_entity_type,
        )

    def _accept_tagged_values(self, object_type: GraphQLObjectType) -> None:
        for field_def in object_type.fields.values():
            field_def.resolve = unwrap_source(field_def.resolve or default_field_resolver)
        if object_type.is_type_of is not None:
            object_type.is_type_of = unwrap_source(object_type.is_type_of)


def relax_entity_union_validation(
    schema: GraphQLSchema, interface_names: Sequence[str]
) -> None:
    """Accept interface entities as members of the ``_Entity`` union.

    Validates the schema and drops only the errors reporting one of
    ``interface_names`` as a non-object member of ``_Entity``. The
    remaining errors are kept and still fail execution.

    Args:
        schema: The federated schema.
        interface_names: Names of the interface entities.
    """
    errors = validate_schema(schema)
    if not interface_names:
        return

    prefix = f"Union type {ENTITY_UNION_NAME} can only include Object types"
    allowed = {f"it cannot include {name}." for name in interface_names}
    # Relies on graphql-core caching validation errors in the private
    # _validation_errors attribute, which validate_schema and execution
    # read back. Recheck on graphql-core upgrades.
    schema._validation_errors = [
        error
        for error in errors
        if not (
            error.message.startswith(prefix)
            and any(error.message.endswith(suffix) for suffix in allowed)
        )
    ]
