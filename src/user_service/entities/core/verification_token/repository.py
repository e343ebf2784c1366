"""Verification token repository for database operations."""

from loguru import logger
from sqlmodel import Session, select

from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities._base import copy_into_row
from src.user_service.entities.core.credential.table import CredentialTable
from src.user_service.entities.core.domain import (
    VERIFICATION_TOKEN_FIELDS,
    Credential,
    VerificationToken,
)
from src.user_service.entities.core.verification_token.table import (
    VerificationTokenTable,
)


class VerificationTokenRepository:
    """Data-access layer for verification tokens."""

    def __init__(self, session: Session) -> None:
        self._session = session
        self._coordinator = RelationshipCoordinator()

    def find_all(self) -> list[VerificationToken]:
        statement = select(VerificationTokenTable).order_by(
            VerificationTokenTable.verification_token_id
        )
        rows = self._session.exec(statement).all()
        return [self._to_domain(row) for row in rows]

    def find_by_id(self, token_id: int) -> VerificationToken | None:
        row = self._get_row(token_id)
        if row is None:
            return None
        return self._to_domain(row)

    def save(self, token: VerificationToken) -> VerificationToken:
        row = None
        if token.verification_token_id is not None:
            row = self._get_row(token.verification_token_id)
        if row is None:
            row = VerificationTokenTable(verification_token_id=token.verification_token_id)
        copy_into_row(row, token, VERIFICATION_TOKEN_FIELDS)
        row.credential_id = (
            None if token.credential is None else token.credential.credential_id
        )
        self._session.add(row)
        self._session.flush()

        logger.debug("Saved verification token {}", row.verification_token_id)
        return self._to_domain(row)

    def delete_by_id(self, token_id: int) -> None:
        row = self._get_row(token_id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    def _get_row(self, token_id: int) -> VerificationTokenTable | None:
        statement = select(VerificationTokenTable).where(
            VerificationTokenTable.verification_token_id == token_id
        )
        return self._session.exec(statement).first()

    def _to_domain(self, row: VerificationTokenTable) -> VerificationToken:
        token = VerificationToken.model_validate(row, from_attributes=True)
        if row.credential_id is not None:
            statement = select(CredentialTable).where(
                CredentialTable.credential_id == row.credential_id
            )
            credential_row = self._session.exec(statement).first()
            if credential_row is not None:
                credential = Credential.model_validate(credential_row, from_attributes=True)
                self._coordinator.attach_verification_token(credential, token)
        return token
