"""Credential ↔ CredentialDto conversion."""

from src.user_service.core.mappers._fields import (
    copy_fields,
    credential_to_domain,
    user_to_domain,
    user_to_transfer,
)
from src.user_service.core.models.transfer import CredentialDto
from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities.core.domain import CREDENTIAL_FIELDS, Credential


class CredentialMapper:
    @staticmethod
    def to_transfer(credential: Credential | None) -> CredentialDto | None:
        if credential is None:
            return None
        user = credential.user
        return copy_fields(
            credential,
            CredentialDto,
            CREDENTIAL_FIELDS,
            user_dto=None if user is None else user_to_transfer(user),
        )

    @staticmethod
    def to_domain(credential_dto: CredentialDto | None) -> Credential | None:
        """Build a credential and, when a user is nested, link both ways.

        The reconstructed user's ``credential`` slot points at the new
        credential, so the graph is navigable from either end and the store
        can tell which credential row belongs to which user.
        """
        if credential_dto is None:
            return None
        credential = credential_to_domain(credential_dto)
        if credential_dto.user_dto is not None:
            user = user_to_domain(credential_dto.user_dto)
            RelationshipCoordinator.attach_credential(user, credential)
        return credential
