"""Federation directive value objects.

A directive attached to a schema member is immutable once declared. The
order of directives on a member, and of arguments inside a directive, is
the declaration order and is never re-sorted.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from federql.utils.field_set import serialize_field_set

KEY_DIRECTIVE = "key"


@dataclass(frozen=True)
class FederationDirective:
    """A federation directive with ordered arguments.

    Attributes:
        name: Directive name without the ``@`` prefix.
        arguments: ``(name, value)`` pairs in declaration order.
    """

    name: str
    arguments: tuple[tuple[str, Any], ...] = ()

    def argument(self, name: str, default: Any = None) -> Any:
        """Get an argument value by name.

        Args:
            name: The argument name.
            default: Value returned when the argument is absent.

        Returns:
            The argument value, or ``default``.
        """
        for arg_name, value in self.arguments:
            if arg_name == name:
                return value
        return default

    @property
    def is_key(self) -> bool:
        return self.name == KEY_DIRECTIVE

    @classmethod
    def key(
        cls,
        fields: Any,
        resolvable: bool | None = None,
        camelize: bool = True,
    ) -> "FederationDirective":
        """Create a ``@key`` directive.

        Args:
            fields: Key fields in field-set notation.
            resolvable: Optional ``resolvable`` flag. Omitted when None.
            camelize: Whether snake_case field names are camelized.

        Returns:
            The directive.
        """
        arguments: list[tuple[str, Any]] = [
            ("fields", serialize_field_set(fields, camelize))
        ]
        if resolvable is not None:
            arguments.append(("resolvable", resolvable))
        return cls(name=KEY_DIRECTIVE, arguments=tuple(arguments))

    @classmethod
    def requires(cls, fields: Any, camelize: bool = True) -> "FederationDirective":
        return cls("requires", (("fields", serialize_field_set(fields, camelize)),))

    @classmethod
    def provides(cls, fields: Any, camelize: bool = True) -> "FederationDirective":
        return cls("provides", (("fields", serialize_field_set(fields, camelize)),))

    @classmethod
    def external(cls) -> "FederationDirective":
        return cls("external")

    @classmethod
    def extends(cls) -> "FederationDirective":
        return cls("extends")

    @classmethod
    def shareable(cls) -> "FederationDirective":
        return cls("shareable")

    @classmethod
    def inaccessible(cls) -> "FederationDirective":
        return cls("inaccessible")

    @classmethod
    def override(cls, from_: str) -> "FederationDirective":
        return cls("override", (("from", from_),))

    @classmethod
    def tag(cls, name: str) -> "FederationDirective":
        return cls("tag", (("name", name),))


def inherit_directives(
    parent: Iterable[FederationDirective],
    own: Iterable[FederationDirective],
) -> tuple[FederationDirective, ...]:
    """Combine a parent member's directives with a child's own.

    Parent directives come first, followed by the child's.

    Args:
        parent: Directives declared on the parent member.
        own: Directives declared on the member itself.

    Returns:
        A new tuple with the concatenated directives.
    """
    return (*parent, *own)


def has_key_directive(directives: Iterable[FederationDirective]) -> bool:
    """Check whether any of the directives is a ``@key``."""
    return any(directive.is_key for directive in directives)
