"""Address repository for database operations."""

from loguru import logger
from sqlmodel import Session, select

from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities._base import copy_into_row
from src.user_service.entities.core.address.table import AddressTable
from src.user_service.entities.core.domain import ADDRESS_FIELDS, Address, User
from src.user_service.entities.core.user.table import UserTable


class AddressRepository:
    """Data-access layer for addresses.

    The owning user is loaded with its profile fields and lists only the
    address that was asked for.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._coordinator = RelationshipCoordinator()

    def find_all(self) -> list[Address]:
        statement = select(AddressTable).order_by(AddressTable.address_id)
        rows = self._session.exec(statement).all()
        return [self._to_domain(row) for row in rows]

    def find_by_id(self, address_id: int) -> Address | None:
        row = self._get_row(address_id)
        if row is None:
            return None
        return self._to_domain(row)

    def save(self, address: Address) -> Address:
        """Insert or update the address row.

        The foreign key comes from ``address.user``; an address without a
        stored user is saved unowned.
        """
        row = None
        if address.address_id is not None:
            row = self._get_row(address.address_id)
        if row is None:
            row = AddressTable(address_id=address.address_id)
        copy_into_row(row, address, ADDRESS_FIELDS)
        row.user_id = None if address.user is None else address.user.user_id
        self._session.add(row)
        self._session.flush()

        logger.debug("Saved address {}", row.address_id)
        return self._to_domain(row)

    def delete_by_id(self, address_id: int) -> None:
        row = self._get_row(address_id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    def _get_row(self, address_id: int) -> AddressTable | None:
        statement = select(AddressTable).where(AddressTable.address_id == address_id)
        return self._session.exec(statement).first()

    def _to_domain(self, row: AddressTable) -> Address:
        address = Address.model_validate(row, from_attributes=True)
        if row.user_id is not None:
            statement = select(UserTable).where(UserTable.user_id == row.user_id)
            user_row = self._session.exec(statement).first()
            if user_row is not None:
                user = User.model_validate(user_row, from_attributes=True)
                self._coordinator.attach_address(user, address)
        return address
