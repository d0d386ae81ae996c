"""Resolution of ``_entities`` representations.

Representations are grouped by ``__typename`` so each entity type's
resolver runs exactly once per call, whatever the interleaving of the
input. Every value is written back at the index of its representation,
so the output order is the input order regardless of which resolver
settles first. A failure while resolving one representation only
affects that representation's slot.
"""

import logging
from collections.abc import Awaitable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from federql.core.entities.entity import (
    EntityDefinition,
    EntityResolverKind,
    Reference,
    ResolvedEntity,
)
from federql.core.errors import EntityResolutionError, UnknownEntityTypeError
from federql.core.interfaces.synchronizer import IValueSynchronizer

logger = logging.getLogger(__name__)

TYPENAME_KEY = "__typename"

# One slot of the output: a tagged value, None, or the slot's failure
Outcome = ResolvedEntity | EntityResolutionError | None


@dataclass
class EntitiesResult:
    """Resolution output split into data and error records.

    ``data`` has one item per representation, None where resolution
    failed. ``errors`` holds one ``{message, path}`` record per failure.
    """

    data: list[Any] = field(default_factory=list)
    errors: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_outcomes(cls, outcomes: Sequence[Outcome]) -> "EntitiesResult":
        result = cls()
        for outcome in outcomes:
            if isinstance(outcome, EntityResolutionError):
                result.data.append(None)
                result.errors.append(outcome.formatted)
            elif isinstance(outcome, ResolvedEntity):
                result.data.append(outcome.value)
            else:
                result.data.append(outcome)
        return result


class EntitiesResolver:
    """Resolves batches of entity representations.

    Also usable directly as the graphql-core resolver of the
    ``_entities`` field.
    """

    def __init__(
        self,
        entities: Sequence[EntityDefinition],
        synchronizer: IValueSynchronizer,
        debug: bool = False,
    ) -> None:
        """Initialize the resolver.

        Args:
            entities: The entities of the schema, from discovery.
            synchronizer: Synchronizer used for deferred values.
            debug: Log per-reference failures at WARNING level.
        """
        self._entities: Mapping[str, EntityDefinition] = {
            entity.name: entity for entity in entities
        }
        self._synchronizer = synchronizer
        self._failure_log_level = logging.WARNING if debug else logging.DEBUG

    @property
    def entity_names(self) -> tuple[str, ...]:
        return tuple(self._entities)

    def __call__(self, _root: Any, info: Any, representations: Sequence[Reference]) -> Any:
        return self.resolve(representations, info)

    def resolve(
        self,
        references: Sequence[Reference],
        info: Any = None,
    ) -> list[Outcome] | Awaitable[list[Outcome]]:
        """Resolve representations into tagged entity values.

        Args:
            references: The representations, each with a ``__typename``.
            info: The GraphQL resolve info, passed on to resolvers.

        Returns:
            One outcome per representation, in input order. The list is
            returned directly when every resolver answered synchronously,
            otherwise an awaitable of it is returned.

        Raises:
            UnknownEntityTypeError: If a ``__typename`` is not an object
                entity of the schema. Raised before any resolver is called.
        """
        if not references:
            return []

        groups = self._partition(references)
        definitions = {typename: self._lookup(typename) for typename in groups}

        outcomes: list[Outcome] = [None] * len(references)
        pending: list[Awaitable[None]] = []
        for typename, indices in groups.items():
            group = [references[index] for index in indices]
            pending.extend(
                self._resolve_group(definitions[typename], indices, group, info, outcomes)
            )

        if not pending:
            return outcomes
        return self._complete(outcomes, pending)

    async def _complete(
        self, outcomes: list[Outcome], pending: list[Awaitable[None]]
    ) -> list[Outcome]:
        await self._synchronizer.flatten(pending)
        return outcomes

    def _partition(self, references: Sequence[Reference]) -> dict[Any, list[int]]:
        """Group representation indices by typename, keeping input order."""
        groups: dict[Any, list[int]] = {}
        for index, reference in enumerate(references):
            typename = reference.get(TYPENAME_KEY) if isinstance(reference, Mapping) else None
            groups.setdefault(typename, []).append(index)
        return groups

    def _lookup(self, typename: Any) -> EntityDefinition:
        entity = self._entities.get(typename) if isinstance(typename, str) else None
        # Interface entities are union members, never representation types
        if entity is None or entity.is_interface:
            raise UnknownEntityTypeError(typename)
        return entity

    def _resolve_group(
        self,
        entity: EntityDefinition,
        indices: list[int],
        references: list[Reference],
        info: Any,
        outcomes: list[Outcome],
    ) -> list[Awaitable[None]]:
        """Run the entity's resolver strategy over one group.

        Returns:
            Awaitables that write the deferred part of the group's
            outcomes when they settle.
        """
        resolver = entity.resolver

        if resolver.kind is EntityResolverKind.BATCH:
            try:
                values = resolver.fn(references, info)
            except Exception as error:
                self._fail_group(entity, indices, error, outcomes)
                return []
            if self._synchronizer.is_deferred(values):
                return [self._settle_batch(entity, indices, values, outcomes)]
            return self._scatter(entity, indices, values, outcomes)

        if resolver.kind is EntityResolverKind.PER_REFERENCE:
            pending: list[Awaitable[None]] = []
            for index, reference in zip(indices, references):
                try:
                    value = resolver.fn(reference, info)
                except Exception as error:
                    outcomes[index] = self._failure(entity, index, error)
                    continue
                pending.extend(self._store(entity, index, value, outcomes))
            return pending

        # Passthrough: the representation is the entity
        for index, reference in zip(indices, references):
            outcomes[index] = self._outcome(entity, index, reference)
        return []

    def _scatter(
        self,
        entity: EntityDefinition,
        indices: list[int],
        values: Any,
        outcomes: list[Outcome],
    ) -> list[Awaitable[None]]:
        """Write a batch result back at the original indices."""
        error = self._check_batch(entity, indices, values)
        if error is not None:
            self._fail_group(entity, indices, error, outcomes)
            return []

        pending: list[Awaitable[None]] = []
        for index, value in zip(indices, values):
            pending.extend(self._store(entity, index, value, outcomes))
        return pending

    def _store(
        self,
        entity: EntityDefinition,
        index: int,
        value: Any,
        outcomes: list[Outcome],
    ) -> list[Awaitable[None]]:
        if self._synchronizer.is_deferred(value):
            return [self._settle(entity, index, value, outcomes)]
        outcomes[index] = self._outcome(entity, index, value)
        return []

    async def _settle(
        self,
        entity: EntityDefinition,
        index: int,
        value: Any,
        outcomes: list[Outcome],
    ) -> None:
        try:
            settled = await self._synchronizer.await_value(value)
        except Exception as error:
            outcomes[index] = self._failure(entity, index, error)
            return
        outcomes[index] = self._outcome(entity, index, settled)

    async def _settle_batch(
        self,
        entity: EntityDefinition,
        indices: list[int],
        deferred: Any,
        outcomes: list[Outcome],
    ) -> None:
        try:
            values = await self._synchronizer.await_value(deferred)
        except Exception as error:
            self._fail_group(entity, indices, error, outcomes)
            return

        error = self._check_batch(entity, indices, values)
        if error is not None:
            self._fail_group(entity, indices, error, outcomes)
            return

        settled = await self._synchronizer.flatten(values)
        for index, value in zip(indices, settled):
            outcomes[index] = self._outcome(entity, index, value)

    def _check_batch(
        self, entity: EntityDefinition, indices: list[int], values: Any
    ) -> Exception | None:
        if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
            return TypeError(
                f"Batch resolver of {entity.name} must return a list, "
                f"got {type(values).__name__}"
            )
        if len(values) != len(indices):
            return ValueError(
                f"Batch resolver of {entity.name} returned {len(values)} "
                f"results for {len(indices)} references"
            )
        return None

    def _outcome(self, entity: EntityDefinition, index: int, value: Any) -> Outcome:
        """Tag a settled value with its entity type."""
        if isinstance(value, Exception):
            return self._failure(entity, index, value)
        if self._synchronizer.is_deferred(value):
            close = getattr(value, "close", None)
            if close is not None:
                close()
            return self._failure(
                entity,
                index,
                TypeError(f"Resolver of {entity.name} returned a nested deferred value"),
            )
        if value is None:
            return None
        return ResolvedEntity(entity_type=entity.graphql_type, value=value)

    def _fail_group(
        self,
        entity: EntityDefinition,
        indices: list[int],
        error: Exception,
        outcomes: list[Outcome],
    ) -> None:
        for index in indices:
            outcomes[index] = self._failure(entity, index, error)

    def _failure(
        self, entity: EntityDefinition, index: int, error: Exception
    ) -> EntityResolutionError:
        logger.log(
            self._failure_log_level,
            "Failed to resolve %s representation at index %d: %s",
            entity.name,
            index,
            error,
        )
        return EntityResolutionError.from_exception(error, index)
