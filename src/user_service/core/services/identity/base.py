"""Shared orchestration for the per-aggregate identity services."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel

from src.user_service.core.exceptions import AggregateNotFoundError, InvalidPayloadError
from src.user_service.core.merge import PartialUpdateMerger
from src.user_service.core.relationships import CascadeStep, RelationshipCoordinator
from src.user_service.core.services.identity.repositories import AggregateRepository

AggregateT = TypeVar("AggregateT", bound=BaseModel)
TransferT = TypeVar("TransferT", bound=BaseModel)


class AggregateService(ABC, Generic[AggregateT, TransferT]):
    """Fetch-or-fail, map, merge, persist and map back for one aggregate type.

    Subclasses name the aggregate, its NotFound error and identity field, and
    plug in the mapper and merge function for their type. Every error raised
    here or by the repository propagates to the caller unchanged.
    """

    aggregate_name: str = "Aggregate"
    identity_field: str = "id"
    not_found_error: type[AggregateNotFoundError] = AggregateNotFoundError

    def __init__(
        self,
        repository: AggregateRepository[AggregateT],
        merger: PartialUpdateMerger | None = None,
        coordinator: RelationshipCoordinator | None = None,
    ) -> None:
        self._repository = repository
        self._coordinator = coordinator or RelationshipCoordinator()
        self._merger = merger or PartialUpdateMerger(self._coordinator)

    @abstractmethod
    def _to_transfer(self, aggregate: AggregateT) -> TransferT:
        raise NotImplementedError

    @abstractmethod
    def _to_domain(self, payload: TransferT) -> AggregateT:
        raise NotImplementedError

    @abstractmethod
    def _merge(self, existing: AggregateT, payload: TransferT) -> AggregateT:
        raise NotImplementedError

    def find_all(self) -> list[TransferT]:
        """Return every stored aggregate, without duplicates, in repository order."""
        seen: set[AggregateT] = set()
        unique: list[AggregateT] = []
        for aggregate in self._repository.find_all():
            if aggregate in seen:
                continue
            seen.add(aggregate)
            unique.append(aggregate)
        logger.debug("Found {} {} aggregates", len(unique), self.aggregate_name)
        return [self._to_transfer(aggregate) for aggregate in unique]

    def find_by_id(self, identifier: int) -> TransferT:
        return self._to_transfer(self._fetch(identifier))

    def save(self, payload: TransferT | None) -> TransferT:
        """Map ``payload`` to a new aggregate, persist it and return the stored state."""
        if payload is None:
            raise InvalidPayloadError(f"{self.aggregate_name} payload is required")
        aggregate = self._coordinator.link(self._to_domain(payload))
        saved = self._repository.save(aggregate)
        logger.info(
            "Saved {} with {}: {}",
            self.aggregate_name,
            self.identity_field,
            getattr(saved, self.identity_field),
        )
        return self._to_transfer(saved)

    def update(self, payload: TransferT | None) -> TransferT:
        """Merge ``payload`` into the aggregate its own identity refers to."""
        if payload is None:
            raise InvalidPayloadError(f"{self.aggregate_name} payload is required")
        identifier = getattr(payload, self.identity_field)
        if identifier is None:
            raise InvalidPayloadError(
                f"{self.aggregate_name} payload carries no {self.identity_field}"
            )
        return self._update(identifier, payload)

    def update_by_id(self, identifier: int, payload: TransferT | None) -> TransferT:
        """Merge ``payload`` into the aggregate stored under ``identifier``.

        The payload's own identity, if any, is ignored.
        """
        if payload is None:
            raise InvalidPayloadError(f"{self.aggregate_name} payload is required")
        return self._update(identifier, payload)

    def delete_by_id(self, identifier: int) -> None:
        """Delete the aggregate, then every dependent the coordinator plans for it.

        Raises:
            CascadeInconsistencyError: the aggregate was removed but one of its
                dependents could not be.
        """
        aggregate = self._find_for_deletion(identifier)
        steps = [] if aggregate is None else self._coordinator.plan_deletion(aggregate)
        logger.info(
            "Deleting {} with {}: {} ({} dependent)",
            self.aggregate_name,
            self.identity_field,
            identifier,
            len(steps),
        )
        self._coordinator.execute_deletion(
            f"{self.aggregate_name} {identifier}",
            lambda: self._repository.delete_by_id(identifier),
            steps,
            self._remove_dependent,
        )

    def _find_for_deletion(self, identifier: int) -> AggregateT | None:
        # Aggregates owning nothing are removed with a single repository call.
        return None

    def _remove_dependent(self, step: CascadeStep) -> None:
        raise NotImplementedError(
            f"{self.aggregate_name} has no removal for dependent {step.aggregate}"
        )

    def _update(self, identifier: int, payload: TransferT) -> TransferT:
        existing = self._fetch(identifier)
        merged = self._merge(existing, payload)
        saved = self._repository.save(merged)
        logger.info(
            "Updated {} with {}: {}", self.aggregate_name, self.identity_field, identifier
        )
        return self._to_transfer(saved)

    def _fetch(self, identifier: Any) -> AggregateT:
        aggregate = self._repository.find_by_id(identifier)
        if aggregate is None:
            raise self._not_found(identifier)
        return aggregate

    def _not_found(self, key: Any, field: str = "id") -> AggregateNotFoundError:
        logger.warning("{} with {}: {} not found", self.aggregate_name, field, key)
        return self.not_found_error(key, field)
