"""Entity entities: definitions, resolver capabilities and resolved values."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from graphql import GraphQLInterfaceType, GraphQLObjectType, is_interface_type

# A caller-supplied representation: at least ``__typename`` plus key fields.
Reference = dict[str, Any]

EntityType = GraphQLObjectType | GraphQLInterfaceType


class EntityResolverKind(Enum):
    """How references of an entity type are turned into values.

    BATCH: One call receives every reference of the type.
    PER_REFERENCE: One call per reference.
    NONE: The reference itself is the resolved value.
    """

    BATCH = "BATCH"
    PER_REFERENCE = "PER_REFERENCE"
    NONE = "NONE"


@dataclass(frozen=True)
class EntityResolver:
    """Resolver capability of an entity type.

    Attributes:
        kind: The resolution strategy.
        fn: The resolver callable. ``fn(references, info)`` for BATCH,
            ``fn(reference, info)`` for PER_REFERENCE, None for NONE.
    """

    kind: EntityResolverKind
    fn: Callable[..., Any] | None = None

    @classmethod
    def batch(cls, fn: Callable[..., Any]) -> "EntityResolver":
        return cls(EntityResolverKind.BATCH, fn)

    @classmethod
    def per_reference(cls, fn: Callable[..., Any]) -> "EntityResolver":
        return cls(EntityResolverKind.PER_REFERENCE, fn)

    @classmethod
    def passthrough(cls) -> "EntityResolver":
        return cls(EntityResolverKind.NONE)


@dataclass(frozen=True)
class EntityDefinition:
    """An entity discovered in a schema.

    Attributes:
        graphql_type: The object or interface type.
        resolver: The resolver capability selected at discovery time.
        keys: The ``fields`` argument of each ``@key``, in declaration order.
    """

    graphql_type: EntityType
    resolver: EntityResolver = field(default_factory=EntityResolver.passthrough)
    keys: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.graphql_type.name

    @property
    def is_interface(self) -> bool:
        return is_interface_type(self.graphql_type)


@dataclass(frozen=True)
class ResolvedEntity:
    """A resolved value tagged with the entity type it belongs to.

    The tag is set once, by the entities resolver, and is what the
    ``_Entity`` union reads to pick the runtime type. The value itself is
    never modified.
    """

    entity_type: EntityType
    value: Any
