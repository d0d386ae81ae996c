"""Awaitable-based value synchronizer."""

import asyncio
from collections.abc import Sequence
from typing import Any

from graphql.pyutils import is_awaitable


class AwaitableSynchronizer:
    """Synchronizer for asyncio awaitables.

    Coroutines, tasks and futures are deferred values; anything else is
    immediate. Uses the same awaitable check as graphql-core so values
    are classified the way the executor classifies them.
    """

    def is_deferred(self, value: Any) -> bool:
        return is_awaitable(value)

    async def await_value(self, value: Any) -> Any:
        if is_awaitable(value):
            return await value
        return value

    async def flatten(self, values: Sequence[Any]) -> list[Any]:
        """Settle every deferred item of a list, keeping order.

        Exceptions raised by an item are returned in its place, so one
        failing item does not discard the others.

        Args:
            values: Immediate or deferred items.

        Returns:
            Settled items, or the exception each failing item raised.
        """
        return await asyncio.gather(
            *(self.await_value(value) for value in values),
            return_exceptions=True,
        )
