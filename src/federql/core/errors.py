"""Exceptions raised by federql."""

from collections.abc import Sequence
from typing import Any

ENTITIES_FIELD_NAME = "_entities"


class FederationError(Exception):
    """Base class for federation errors."""

    pass


class CompositionError(FederationError):
    """Raised when a schema cannot be turned into a valid subgraph.

    An interface carrying ``@key`` is implemented by object types that
    lack their own ``@key``.
    """

    def __init__(self, interface_name: str, offending_types: Sequence[str]) -> None:
        self.interface_name = interface_name
        self.offending_types = tuple(offending_types)
        names = ", ".join(f"`{name}`" for name in self.offending_types)
        super().__init__(
            f"Interface {interface_name} is not valid. Types {names} do not have "
            "a @key directive. All types that implement an interface with a "
            "@key directive must also have a @key directive."
        )


class UnknownEntityTypeError(FederationError):
    """Raised when a representation names a type that is not an entity."""

    def __init__(self, typename: Any) -> None:
        self.typename = typename
        super().__init__(
            f'The _entities resolver tried to load an entity for type "{typename}",'
            " but no object type of that name was found in the schema"
        )


class EntityResolutionError(FederationError):
    """Failure to resolve a single representation.

    Carries the position of the representation so the failure can be
    reported at ``["_entities", index]`` without affecting its siblings.
    """

    def __init__(
        self,
        message: str,
        index: int,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.index = index
        self.original_error = original_error

    @property
    def path(self) -> list[str | int]:
        return [ENTITIES_FIELD_NAME, self.index]

    @property
    def formatted(self) -> dict[str, Any]:
        """The error record as reported to clients."""
        return {"message": self.message, "path": self.path}

    @classmethod
    def from_exception(cls, error: BaseException, index: int) -> "EntityResolutionError":
        if isinstance(error, EntityResolutionError):
            return cls(error.message, index, error.original_error)
        return cls(str(error), index, error)


class IncoercibleAnyTypeError(FederationError):
    """Raised when a value cannot be coerced to the ``_Any`` scalar."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f'Can\'t coerce value "{value}" to type _Any')
