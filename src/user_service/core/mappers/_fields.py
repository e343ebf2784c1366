"""One-level converters shared by the mappers.

Domain aggregates and transfer objects use the same field names, so a
shallow conversion is a copy of the scalar fields into the other model. The
helpers here never follow relationships; the mappers decide which nested
aggregate to expand.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

from src.user_service.core.models.transfer import (
    AddressDto,
    CredentialDto,
    UserDto,
    VerificationTokenDto,
)
from src.user_service.entities.core.domain import (
    ADDRESS_FIELDS,
    CREDENTIAL_FIELDS,
    USER_FIELDS,
    VERIFICATION_TOKEN_FIELDS,
    Address,
    Credential,
    User,
    VerificationToken,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


def copy_fields(
    source: Any, target: type[ModelT], fields: tuple[str, ...], **relations: Any
) -> ModelT:
    """Build ``target`` from the ``fields`` of ``source`` plus explicit relations."""
    values = {name: getattr(source, name) for name in fields}
    values.update(relations)
    return target(**values)


def user_to_transfer(user: User) -> UserDto:
    return copy_fields(user, UserDto, USER_FIELDS)


def user_to_domain(user_dto: UserDto) -> User:
    return copy_fields(user_dto, User, USER_FIELDS)


def credential_to_transfer(credential: Credential) -> CredentialDto:
    return copy_fields(credential, CredentialDto, CREDENTIAL_FIELDS)


def credential_to_domain(credential_dto: CredentialDto) -> Credential:
    return copy_fields(credential_dto, Credential, CREDENTIAL_FIELDS)


def address_to_transfer(address: Address) -> AddressDto:
    return copy_fields(address, AddressDto, ADDRESS_FIELDS)


def address_to_domain(address_dto: AddressDto) -> Address:
    return copy_fields(address_dto, Address, ADDRESS_FIELDS)


def verification_token_to_domain(token_dto: VerificationTokenDto) -> VerificationToken:
    return copy_fields(token_dto, VerificationToken, VERIFICATION_TOKEN_FIELDS)
