"""Identity services and their wiring to the SQLModel repositories."""

from dataclasses import dataclass

from sqlmodel import Session

from src.user_service.core.merge import PartialUpdateMerger
from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities.core.address import AddressRepository
from src.user_service.entities.core.credential import CredentialRepository
from src.user_service.entities.core.user import UserRepository
from src.user_service.entities.core.verification_token import VerificationTokenRepository

from .address import AddressService
from .base import AggregateService
from .credential import CredentialService
from .user import UserService
from .verification_token import VerificationTokenService


@dataclass(frozen=True)
class IdentityServices:
    """The four services bound to one database session."""

    users: UserService
    credentials: CredentialService
    addresses: AddressService
    verification_tokens: VerificationTokenService


def build_identity_services(session: Session) -> IdentityServices:
    """Wire every service to SQLModel repositories sharing ``session``.

    The mapper, coordinator and merger are stateless and shared. Committing
    is left to whoever owns ``session``.
    """
    coordinator = RelationshipCoordinator()
    merger = PartialUpdateMerger(coordinator)
    credential_repo = CredentialRepository(session)
    return IdentityServices(
        users=UserService(UserRepository(session), credential_repo, merger, coordinator),
        credentials=CredentialService(credential_repo, merger, coordinator),
        addresses=AddressService(AddressRepository(session), merger, coordinator),
        verification_tokens=VerificationTokenService(
            VerificationTokenRepository(session), merger, coordinator
        ),
    )


__all__ = [
    "AggregateService",
    "AddressService",
    "CredentialService",
    "IdentityServices",
    "UserService",
    "VerificationTokenService",
    "build_identity_services",
]
