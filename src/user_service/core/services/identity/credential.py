"""Credential service."""

from src.user_service.core.exceptions import CredentialNotFoundError
from src.user_service.core.mappers import CredentialMapper
from src.user_service.core.merge import PartialUpdateMerger
from src.user_service.core.models import CredentialDto
from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.core.services.identity.base import AggregateService
from src.user_service.core.services.identity.repositories import (
    CredentialRepositoryProtocol,
)
from src.user_service.entities.core.domain import Credential


class CredentialService(AggregateService[Credential, CredentialDto]):
    aggregate_name = "Credential"
    identity_field = "credential_id"
    not_found_error = CredentialNotFoundError

    def __init__(
        self,
        credential_repo: CredentialRepositoryProtocol,
        merger: PartialUpdateMerger | None = None,
        coordinator: RelationshipCoordinator | None = None,
    ) -> None:
        super().__init__(credential_repo, merger, coordinator)
        self._credential_repo = credential_repo

    def _to_transfer(self, aggregate: Credential) -> CredentialDto:
        return CredentialMapper.to_transfer(aggregate)

    def _to_domain(self, payload: CredentialDto) -> Credential:
        return CredentialMapper.to_domain(payload)

    def _merge(self, existing: Credential, payload: CredentialDto) -> Credential:
        return self._merger.merge_credential(existing, payload)

    def find_by_username(self, username: str) -> CredentialDto:
        credential = self._credential_repo.find_by_username(username)
        if credential is None:
            raise self._not_found(username, "username")
        return self._to_transfer(credential)
