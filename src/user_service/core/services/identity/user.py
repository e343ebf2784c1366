"""User service: profile CRUD and the user→credential delete cascade."""

from src.user_service.core.exceptions import UserNotFoundError
from src.user_service.core.mappers import UserMapper
from src.user_service.core.merge import PartialUpdateMerger
from src.user_service.core.models import UserDto
from src.user_service.core.relationships import CascadeStep, RelationshipCoordinator
from src.user_service.core.services.identity.base import AggregateService
from src.user_service.core.services.identity.repositories import (
    CredentialRepositoryProtocol,
    UserRepositoryProtocol,
)
from src.user_service.entities.core.domain import User


class UserService(AggregateService[User, UserDto]):
    aggregate_name = "User"
    identity_field = "user_id"
    not_found_error = UserNotFoundError

    def __init__(
        self,
        user_repo: UserRepositoryProtocol,
        credential_repo: CredentialRepositoryProtocol,
        merger: PartialUpdateMerger | None = None,
        coordinator: RelationshipCoordinator | None = None,
    ) -> None:
        super().__init__(user_repo, merger, coordinator)
        self._user_repo = user_repo
        self._credential_repo = credential_repo

    def _to_transfer(self, aggregate: User) -> UserDto:
        return UserMapper.to_transfer(aggregate)

    def _to_domain(self, payload: UserDto) -> User:
        return UserMapper.to_domain(payload)

    def _merge(self, existing: User, payload: UserDto) -> User:
        return self._merger.merge_user(existing, payload)

    def find_by_username(self, username: str) -> UserDto:
        """Find the user owning the credential with ``username``."""
        user = self._user_repo.find_by_credential_username(username)
        if user is None:
            raise self._not_found(username, "username")
        return self._to_transfer(user)

    def _find_for_deletion(self, identifier: int) -> User:
        # Deleting a missing user is an error; the credential cascade needs the graph.
        return self._fetch(identifier)

    def _remove_dependent(self, step: CascadeStep) -> None:
        self._credential_repo.delete_by_credential_id(step.identifier)
