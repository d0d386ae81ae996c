"""Framework-agnostic entity resolver decorators.

Registers reference resolvers for entity types by name, for schemas that
are not built through an adapter. Registered resolvers are used by
``federate_schema`` for entity types that have no explicit or bound
resolver.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from federql.core.entities.entity import EntityResolver

F = TypeVar("F", bound=Callable[..., Any])

# Module-level resolver registry: type name -> resolver
_registry: dict[str, EntityResolver] = {}


def reference_resolver(type_name: str) -> Callable[[F], F]:
    """Register a per-reference resolver for an entity type.

    The function is called once per representation with
    ``(reference, info)`` and may be sync or async.

    Args:
        type_name: The entity type name.

    Returns:
        Decorator returning the function unchanged.

    Example:
        @reference_resolver("Product")
        async def resolve_product(reference, info):
            return await db.get_product(reference["upc"])
    """

    def decorator(func: F) -> F:
        _registry[type_name] = EntityResolver.per_reference(func)
        return func

    return decorator


def references_resolver(type_name: str) -> Callable[[F], F]:
    """Register a batch resolver for an entity type.

    The function is called once per ``_entities`` request with every
    representation of the type, as ``(references, info)``, and must
    return one value per representation in the same order.

    Args:
        type_name: The entity type name.

    Returns:
        Decorator returning the function unchanged.

    Example:
        @references_resolver("Product")
        async def resolve_products(references, info):
            upcs = [reference["upc"] for reference in references]
            products = await db.get_products(upcs)
            return [products.get(upc) for upc in upcs]
    """

    def decorator(func: F) -> F:
        _registry[type_name] = EntityResolver.batch(func)
        return func

    return decorator


def get_registered_resolvers() -> dict[str, EntityResolver]:
    """Get a copy of the registered resolvers.

    Returns:
        Mapping of type name to resolver.
    """
    return dict(_registry)


def clear_registered_resolvers() -> None:
    """Remove every registered resolver."""
    _registry.clear()
