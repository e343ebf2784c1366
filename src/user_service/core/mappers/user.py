"""User ↔ UserDto conversion."""

from src.user_service.core.mappers._fields import (
    address_to_domain,
    address_to_transfer,
    copy_fields,
    credential_to_domain,
    credential_to_transfer,
)
from src.user_service.core.models.transfer import UserDto
from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities.core.domain import USER_FIELDS, User

_coordinator = RelationshipCoordinator()


class UserMapper:
    """Maps users together with their credential and addresses.

    The nested credential and addresses are expanded without their own user
    back-reference; on the domain side the links are restored by the
    coordinator.
    """

    @staticmethod
    def to_transfer(user: User | None) -> UserDto | None:
        if user is None:
            return None
        credential = user.credential
        return copy_fields(
            user,
            UserDto,
            USER_FIELDS,
            credential_dto=None if credential is None else credential_to_transfer(credential),
            address_dtos=[address_to_transfer(address) for address in user.addresses] or None,
        )

    @staticmethod
    def to_domain(user_dto: UserDto | None) -> User | None:
        if user_dto is None:
            return None
        credential_dto = user_dto.credential_dto
        user = copy_fields(
            user_dto,
            User,
            USER_FIELDS,
            credential=None if credential_dto is None else credential_to_domain(credential_dto),
            addresses=[address_to_domain(dto) for dto in user_dto.address_dtos or ()],
        )
        return _coordinator.link(user)
