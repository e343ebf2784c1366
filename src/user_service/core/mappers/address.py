"""Address ↔ AddressDto conversion."""

from src.user_service.core.mappers._fields import (
    address_to_domain,
    copy_fields,
    user_to_domain,
    user_to_transfer,
)
from src.user_service.core.models.transfer import AddressDto
from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities.core.domain import ADDRESS_FIELDS, Address


class AddressMapper:
    @staticmethod
    def to_transfer(address: Address | None) -> AddressDto | None:
        if address is None:
            return None
        user = address.user
        return copy_fields(
            address,
            AddressDto,
            ADDRESS_FIELDS,
            user_dto=None if user is None else user_to_transfer(user),
        )

    @staticmethod
    def to_domain(address_dto: AddressDto | None) -> Address | None:
        if address_dto is None:
            return None
        address = address_to_domain(address_dto)
        if address_dto.user_dto is not None:
            RelationshipCoordinator.attach_address(user_to_domain(address_dto.user_dto), address)
        return address
