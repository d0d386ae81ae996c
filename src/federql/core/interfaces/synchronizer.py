"""Value synchronizer interface."""

from collections.abc import Awaitable, Sequence
from typing import Any, Protocol


class IValueSynchronizer(Protocol):
    """Contract for treating immediate and deferred values uniformly.

    A deferred value is a handle that produces its value later. The
    entities resolver only talks to deferred values through this
    protocol.
    """

    def is_deferred(self, value: Any) -> bool:
        """Check if a value is deferred.

        Args:
            value: Any value returned by a resolver.

        Returns:
            True if the value must be awaited to obtain the result.
        """
        ...

    async def await_value(self, value: Any) -> Any:
        """Obtain the immediate value behind a possibly deferred value.

        Suspends the caller until the value settles without blocking
        other concurrent work. Immediate values are returned as they are.

        Args:
            value: An immediate or deferred value.

        Returns:
            The settled value.
        """
        ...

    def flatten(self, values: Sequence[Any]) -> Awaitable[list[Any]]:
        """Flatten one level of deferral in a list.

        Args:
            values: A list whose items may be immediate or deferred.

        Returns:
            A deferred list of settled items, in the same order. Items
            that are themselves deferred after settling are kept as they
            are.
        """
        ...
