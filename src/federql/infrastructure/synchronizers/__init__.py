"""Value synchronizer implementations."""

from federql.infrastructure.synchronizers.awaitable import AwaitableSynchronizer

__all__ = ["AwaitableSynchronizer"]
