"""Repository contracts the identity services depend on.

The SQLModel repositories under ``src.user_service.entities.core`` satisfy
them; tests substitute mocks.
"""

from typing import Protocol, TypeVar

from src.user_service.entities.core.domain import (
    Address,
    Credential,
    User,
    VerificationToken,
)

AggregateT = TypeVar("AggregateT")


class AggregateRepository(Protocol[AggregateT]):
    def find_all(self) -> list[AggregateT]: ...

    def find_by_id(self, identifier: int) -> AggregateT | None: ...

    def save(self, aggregate: AggregateT) -> AggregateT: ...

    def delete_by_id(self, identifier: int) -> None: ...


class UserRepositoryProtocol(AggregateRepository[User], Protocol):
    def find_by_credential_username(self, username: str) -> User | None: ...


class CredentialRepositoryProtocol(AggregateRepository[Credential], Protocol):
    def find_by_username(self, username: str) -> Credential | None: ...

    def delete_by_credential_id(self, credential_id: int) -> None: ...


class AddressRepositoryProtocol(AggregateRepository[Address], Protocol):
    pass


class VerificationTokenRepositoryProtocol(AggregateRepository[VerificationToken], Protocol):
    pass
