"""Transfer objects exchanged with the resource layer.

Field names are snake_case in Python and camelCase on the wire
(``userId``, ``credentialDto``...). Every field is optional so the same models
carry creation payloads, responses and sparse update patches; which fields a
caller actually supplied is tracked by pydantic in ``model_fields_set``.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.user_service.entities.core.domain import RoleBasedAuthority


class TransferModel(BaseModel):
    """Shared configuration for transfer objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Serialize with wire names, leaving out fields that are ``None``."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UserDto(TransferModel):
    user_id: int | None = Field(default=None, description="User identity")
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None
    email: str | None = None
    phone: str | None = None
    credential_dto: CredentialDto | None = None
    address_dtos: list[AddressDto] | None = None


class CredentialDto(TransferModel):
    credential_id: int | None = Field(default=None, description="Credential identity")
    username: str | None = None
    password: str | None = None
    role_based_authority: RoleBasedAuthority | None = None
    is_enabled: bool | None = None
    is_account_non_expired: bool | None = None
    is_account_non_locked: bool | None = None
    is_credentials_non_expired: bool | None = None
    user_dto: UserDto | None = None


class AddressDto(TransferModel):
    address_id: int | None = Field(default=None, description="Address identity")
    full_address: str | None = None
    postal_code: str | None = None
    city: str | None = None
    user_dto: UserDto | None = None


class VerificationTokenDto(TransferModel):
    verification_token_id: int | None = Field(
        default=None, description="Verification token identity"
    )
    token: str | None = None
    expire_date: date | None = None
    credential_dto: CredentialDto | None = None


UserDto.model_rebuild()
CredentialDto.model_rebuild()
AddressDto.model_rebuild()
VerificationTokenDto.model_rebuild()
