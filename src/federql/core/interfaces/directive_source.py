"""Directive source interface."""

from typing import Protocol

from federql.core.entities.directive import FederationDirective


class IDirectiveSource(Protocol):
    """Read-only access to the federation directives of schema members."""

    def for_type(self, type_name: str) -> tuple[FederationDirective, ...]:
        """Get the directives declared on a type.

        Args:
            type_name: The type name.

        Returns:
            The directives in declaration order, empty when none.
        """
        ...

    def for_field(
        self, type_name: str, field_name: str
    ) -> tuple[FederationDirective, ...]:
        """Get the directives declared on a field."""
        ...

    def for_argument(
        self, type_name: str, field_name: str, argument_name: str
    ) -> tuple[FederationDirective, ...]:
        """Get the directives declared on a field argument."""
        ...
