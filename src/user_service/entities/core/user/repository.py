"""User repository for database operations."""

from loguru import logger
from sqlmodel import Session, select

from src.user_service.core.exceptions import InvalidPayloadError
from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities._base import copy_into_row
from src.user_service.entities.core.address.table import AddressTable
from src.user_service.entities.core.credential.table import CredentialTable
from src.user_service.entities.core.domain import (
    ADDRESS_FIELDS,
    CREDENTIAL_FIELDS,
    USER_FIELDS,
    Address,
    Credential,
    User,
)
from src.user_service.entities.core.user.table import UserTable


class UserRepository:
    """Data-access layer for users.

    A user is stored as its own row plus the credential and address rows that
    reference it. Reads return the whole graph, linked in both directions;
    ``save`` writes the whole graph back.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._coordinator = RelationshipCoordinator()

    def find_all(self) -> list[User]:
        statement = select(UserTable).order_by(UserTable.user_id)
        rows = self._session.exec(statement).all()
        return [self._to_domain(row) for row in rows]

    def find_by_id(self, user_id: int) -> User | None:
        row = self._get_row(user_id)
        if row is None:
            return None
        return self._to_domain(row)

    def find_by_credential_username(self, username: str) -> User | None:
        statement = (
            select(UserTable)
            .join(CredentialTable, CredentialTable.user_id == UserTable.user_id)
            .where(CredentialTable.username == username)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_domain(row)

    def save(self, user: User) -> User:
        """Insert or update the user row, its credential row and its address rows.

        Address rows of this user that are no longer listed are removed. A
        user without a credential leaves any stored credential untouched.

        Raises:
            InvalidPayloadError: a nested credential or address id refers to a
                row owned by another user.
        """
        self._check_nested_ownership(user)
        row = self._get_row(user.user_id) if user.user_id is not None else None
        if row is None:
            row = UserTable(user_id=user.user_id)
        copy_into_row(row, user, USER_FIELDS)
        self._session.add(row)
        self._session.flush()

        if user.credential is not None:
            self._save_credential_row(row.user_id, user.credential)
        self._sync_address_rows(row.user_id, user.addresses)
        self._session.flush()

        logger.debug("Saved user {}", row.user_id)
        return self._to_domain(row)

    def delete_by_id(self, user_id: int) -> None:
        """Delete the user row and its address rows.

        The credential row stays, detached from the user by the foreign key
        (``SET NULL``); the caller removes it by credential id as part of the
        user cascade.
        """
        for address_row in self._address_rows(user_id):
            self._session.delete(address_row)
        row = self._get_row(user_id)
        if row is not None:
            self._session.delete(row)
        self._session.flush()

    def _get_row(self, user_id: int) -> UserTable | None:
        statement = select(UserTable).where(UserTable.user_id == user_id)
        return self._session.exec(statement).first()

    def _address_rows(self, user_id: int) -> list[AddressTable]:
        statement = (
            select(AddressTable)
            .where(AddressTable.user_id == user_id)
            .order_by(AddressTable.address_id)
        )
        return list(self._session.exec(statement).all())

    def _credential_row(self, user_id: int) -> CredentialTable | None:
        statement = select(CredentialTable).where(CredentialTable.user_id == user_id)
        return self._session.exec(statement).first()

    def _credential_by_id(self, credential_id: int) -> CredentialTable | None:
        statement = select(CredentialTable).where(
            CredentialTable.credential_id == credential_id
        )
        return self._session.exec(statement).first()

    def _address_by_id(self, address_id: int) -> AddressTable | None:
        statement = select(AddressTable).where(AddressTable.address_id == address_id)
        return self._session.exec(statement).first()

    def _check_nested_ownership(self, user: User) -> None:
        """Reject nested ids that would move another user's rows to ``user``.

        A nested row may be claimed only when it already belongs to ``user``
        or belongs to nobody. An unowned credential is claimable only while
        ``user`` has none.
        """
        owner_id = user.user_id
        credential = user.credential
        if credential is not None and credential.credential_id is not None:
            row = self._credential_by_id(credential.credential_id)
            if row is not None and row.user_id != owner_id:
                if row.user_id is not None:
                    raise InvalidPayloadError(
                        f"Credential with id: {row.credential_id} belongs to another user"
                    )
                if owner_id is not None and self._credential_row(owner_id) is not None:
                    raise InvalidPayloadError(
                        f"User with id: {owner_id} already owns a credential"
                    )
        for address in user.addresses:
            if address.address_id is None:
                continue
            row = self._address_by_id(address.address_id)
            if row is not None and row.user_id is not None and row.user_id != owner_id:
                raise InvalidPayloadError(
                    f"Address with id: {row.address_id} belongs to another user"
                )

    def _save_credential_row(self, user_id: int, credential: Credential) -> None:
        row = None
        if credential.credential_id is not None:
            row = self._credential_by_id(credential.credential_id)
        if row is None:
            row = self._credential_row(user_id)
        if row is None:
            row = CredentialTable(credential_id=credential.credential_id)
        copy_into_row(row, credential, CREDENTIAL_FIELDS)
        row.user_id = user_id
        self._session.add(row)

    def _sync_address_rows(self, user_id: int, addresses: list[Address]) -> None:
        stored = {row.address_id: row for row in self._address_rows(user_id)}
        kept: set[int] = set()
        for address in addresses:
            row = None
            if address.address_id is not None:
                row = stored.get(address.address_id) or self._address_by_id(
                    address.address_id
                )
            if row is None:
                row = AddressTable(address_id=address.address_id)
            copy_into_row(row, address, ADDRESS_FIELDS)
            row.user_id = user_id
            self._session.add(row)
            if address.address_id is not None:
                kept.add(address.address_id)
        for address_id, row in stored.items():
            if address_id not in kept:
                self._session.delete(row)

    def _to_domain(self, row: UserTable) -> User:
        user = User.model_validate(row, from_attributes=True)
        credential_row = self._credential_row(row.user_id)
        if credential_row is not None:
            credential = Credential.model_validate(credential_row, from_attributes=True)
            self._coordinator.attach_credential(user, credential)
        for address_row in self._address_rows(row.user_id):
            address = Address.model_validate(address_row, from_attributes=True)
            self._coordinator.attach_address(user, address)
        return user
