"""VerificationToken ↔ VerificationTokenDto conversion."""

from src.user_service.core.mappers._fields import (
    copy_fields,
    credential_to_domain,
    credential_to_transfer,
    verification_token_to_domain,
)
from src.user_service.core.models.transfer import VerificationTokenDto
from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities.core.domain import (
    VERIFICATION_TOKEN_FIELDS,
    VerificationToken,
)


class VerificationTokenMapper:
    """Maps verification tokens, expanding the credential without its user.

    The ``*_minimal`` variants are for call sites that must not expand the
    credential at all: the result has its credential explicitly set to
    ``None``.
    """

    @staticmethod
    def to_transfer(token: VerificationToken | None) -> VerificationTokenDto | None:
        if token is None:
            return None
        credential = token.credential
        return copy_fields(
            token,
            VerificationTokenDto,
            VERIFICATION_TOKEN_FIELDS,
            credential_dto=None if credential is None else credential_to_transfer(credential),
        )

    @staticmethod
    def to_domain(token_dto: VerificationTokenDto | None) -> VerificationToken | None:
        if token_dto is None:
            return None
        token = verification_token_to_domain(token_dto)
        if token_dto.credential_dto is not None:
            RelationshipCoordinator.attach_verification_token(
                credential_to_domain(token_dto.credential_dto), token
            )
        return token

    @staticmethod
    def to_transfer_minimal(token: VerificationToken | None) -> VerificationTokenDto | None:
        if token is None:
            return None
        return copy_fields(
            token, VerificationTokenDto, VERIFICATION_TOKEN_FIELDS, credential_dto=None
        )

    @staticmethod
    def to_domain_minimal(token_dto: VerificationTokenDto | None) -> VerificationToken | None:
        if token_dto is None:
            return None
        return copy_fields(
            token_dto, VerificationToken, VERIFICATION_TOKEN_FIELDS, credential=None
        )
