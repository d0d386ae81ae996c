"""Infrastructure layer implementations for federql."""

from federql.infrastructure.synchronizers import AwaitableSynchronizer

__all__ = [
    "AwaitableSynchronizer",
]
