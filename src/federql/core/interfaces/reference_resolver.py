"""Reference resolver interfaces."""

from collections.abc import Sequence
from typing import Any, Protocol

from federql.core.entities.entity import Reference


class IReferenceResolver(Protocol):
    """Resolves one representation into an entity value.

    May return the value, None, or an awaitable producing either.
    """

    def __call__(self, reference: Reference, info: Any) -> Any: ...


class IReferencesResolver(Protocol):
    """Resolves every representation of one type in a single call.

    Must return a list (or an awaitable of a list) with one item per
    representation, in the same order. Items may themselves be
    awaitables.
    """

    def __call__(self, references: Sequence[Reference], info: Any) -> Any: ...
