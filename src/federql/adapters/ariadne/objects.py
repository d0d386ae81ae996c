"""Ariadne bindable for entity object types."""

from collections.abc import Callable
from typing import Any, TypeVar

from ariadne import ObjectType
from graphql import GraphQLSchema

from federql.core.interfaces.reference_resolver import (
    IReferenceResolver,
    IReferencesResolver,
)
from federql.core.services.entity_discovery import (
    RESOLVE_REFERENCE_KEY,
    RESOLVE_REFERENCES_KEY,
)

F = TypeVar("F", bound=Callable[..., Any])


class EntityObjectType(ObjectType):
    """Ariadne ObjectType for entity object types.

    Reference resolvers end up in the type's ``extensions``, where entity
    discovery reads them.
    """

    def __init__(self, name: str, *args: Any, **kwargs: Any) -> None:
        super().__init__(name, *args, **kwargs)
        self._reference_resolver: IReferenceResolver | None = None
        self._references_resolver: IReferencesResolver | None = None

    def reference_resolver(self, resolver: F) -> F:
        """Set the per-reference resolver, called as ``(reference, info)``.

        Example::

            product = EntityObjectType("Product")

            @product.reference_resolver
            def resolve_product(reference, info):
                return PRODUCTS.get(reference["upc"])
        """
        self._reference_resolver = resolver
        return resolver

    def references_resolver(self, resolver: F) -> F:
        """Set the batch resolver, called as ``(references, info)``.

        Takes precedence over the per-reference resolver.
        """
        self._references_resolver = resolver
        return resolver

    def bind_to_schema(self, schema: GraphQLSchema) -> None:
        super().bind_to_schema(schema)

        graphql_type = schema.type_map[self.name]
        extensions = dict(graphql_type.extensions or {})
        if self._references_resolver is not None:
            extensions[RESOLVE_REFERENCES_KEY] = self._references_resolver
        if self._reference_resolver is not None:
            extensions[RESOLVE_REFERENCE_KEY] = self._reference_resolver
        graphql_type.extensions = extensions
