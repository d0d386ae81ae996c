"""Core interfaces (Protocol classes) for federql."""

from federql.core.interfaces.directive_source import IDirectiveSource
from federql.core.interfaces.reference_resolver import (
    IReferenceResolver,
    IReferencesResolver,
)
from federql.core.interfaces.synchronizer import IValueSynchronizer

__all__ = [
    "IDirectiveSource",
    "IReferenceResolver",
    "IReferencesResolver",
    "IValueSynchronizer",
]
