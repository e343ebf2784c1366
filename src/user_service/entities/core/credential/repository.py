"""Credential repository for database operations."""

from loguru import logger
from sqlmodel import Session, select

from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities._base import copy_into_row
from src.user_service.entities.core.credential.table import CredentialTable
from src.user_service.entities.core.domain import (
    CREDENTIAL_FIELDS,
    USER_FIELDS,
    Credential,
    User,
)
from src.user_service.entities.core.user.table import UserTable


class CredentialRepository:
    """Data-access layer for credentials.

    Credentials are returned linked to their owning user (profile fields
    only). Saving a credential whose user has no identity yet stores that user
    first so the credential row can reference it; an already stored user is
    only referenced, never updated from here.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._coordinator = RelationshipCoordinator()

    def find_all(self) -> list[Credential]:
        statement = select(CredentialTable).order_by(CredentialTable.credential_id)
        rows = self._session.exec(statement).all()
        return [self._to_domain(row) for row in rows]

    def find_by_id(self, credential_id: int) -> Credential | None:
        row = self._get_row(credential_id)
        if row is None:
            return None
        return self._to_domain(row)

    def find_by_username(self, username: str) -> Credential | None:
        statement = select(CredentialTable).where(CredentialTable.username == username)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_domain(row)

    def save(self, credential: Credential) -> Credential:
        row = None
        if credential.credential_id is not None:
            row = self._get_row(credential.credential_id)
        if row is None:
            row = CredentialTable(credential_id=credential.credential_id)
        copy_into_row(row, credential, CREDENTIAL_FIELDS)
        if credential.user is not None:
            row.user_id = self._save_user_row(credential.user)
        self._session.add(row)
        self._session.flush()

        logger.debug("Saved credential {}", row.credential_id)
        return self._to_domain(row)

    def delete_by_id(self, credential_id: int) -> None:
        row = self._get_row(credential_id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    def delete_by_credential_id(self, credential_id: int) -> None:
        """Delete by credential id; used when the owning user is removed."""
        self.delete_by_id(credential_id)

    def _get_row(self, credential_id: int) -> CredentialTable | None:
        statement = select(CredentialTable).where(
            CredentialTable.credential_id == credential_id
        )
        return self._session.exec(statement).first()

    def _save_user_row(self, user: User) -> int:
        row = None
        if user.user_id is not None:
            statement = select(UserTable).where(UserTable.user_id == user.user_id)
            row = self._session.exec(statement).first()
        if row is None:
            row = UserTable(user_id=user.user_id)
            copy_into_row(row, user, USER_FIELDS)
            self._session.add(row)
            self._session.flush()
        return row.user_id

    def _to_domain(self, row: CredentialTable) -> Credential:
        credential = Credential.model_validate(row, from_attributes=True)
        if row.user_id is not None:
            statement = select(UserTable).where(UserTable.user_id == row.user_id)
            user_row = self._session.exec(statement).first()
            if user_row is not None:
                user = User.model_validate(user_row, from_attributes=True)
                self._coordinator.attach_credential(user, credential)
        return credential
