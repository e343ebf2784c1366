"""Domain aggregates of the identity service.

The four aggregates form a small cyclic graph:

- ``User`` owns zero-or-one ``Credential`` and zero-or-many ``Address``.
- ``Credential`` points back at its ``User``.
- ``Address`` points back at its ``User``.
- ``VerificationToken`` points at the ``Credential`` it verifies.

They live in one module so the forward references resolve without import
cycles. Back-reference fields are hidden from ``repr`` and ignored by equality,
which keeps both finite on a linked graph.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from pydantic import Field

from src.user_service.entities._base import Entity


class RoleBasedAuthority(str, Enum):
    """Role granted to a credential."""

    ROLE_USER = "ROLE_USER"
    ROLE_ADMIN = "ROLE_ADMIN"


# Scalar fields per aggregate, identity first. Transfer objects and tables use
# the same names.
USER_FIELDS = ("user_id", "first_name", "last_name", "image_url", "email", "phone")
CREDENTIAL_FIELDS = (
    "credential_id",
    "username",
    "password",
    "role_based_authority",
    "is_enabled",
    "is_account_non_expired",
    "is_account_non_locked",
    "is_credentials_non_expired",
)
ADDRESS_FIELDS = ("address_id", "full_address", "postal_code", "city")
VERIFICATION_TOKEN_FIELDS = ("verification_token_id", "token", "expire_date")


class User(Entity):
    """A person known to the system, with profile data and owned aggregates."""

    user_id: int | None = Field(default=None, description="Storage-assigned identity")
    first_name: str | None = Field(default=None, description="User's first name")
    last_name: str | None = Field(default=None, description="User's last name")
    image_url: str | None = Field(default=None, description="Profile image URL")
    email: str | None = Field(default=None, description="User's email address")
    phone: str | None = Field(default=None, description="User's phone number")
    credential: Credential | None = Field(default=None)
    addresses: list[Address] = Field(default_factory=list, repr=False)

    def __eq__(self, other: Any) -> bool:
        """Compare users by their profile attributes, ignoring relationships."""
        if not isinstance(other, User):
            return False

        return (
            self.user_id == other.user_id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.image_url == other.image_url
            and self.email == other.email
            and self.phone == other.phone
        )

    def __hash__(self) -> int:
        return hash((
            self.user_id,
            self.first_name,
            self.last_name,
            self.image_url,
            self.email,
            self.phone,
        ))


class Credential(Entity):
    """Login credential of exactly one user.

    The password is stored as received; hashing happens upstream.
    """

    credential_id: int | None = Field(default=None, description="Storage-assigned identity")
    username: str | None = Field(default=None, description="Unique login name")
    password: str | None = Field(default=None, description="Opaque password value")
    role_based_authority: RoleBasedAuthority | None = Field(default=None)
    is_enabled: bool | None = Field(default=None)
    is_account_non_expired: bool | None = Field(default=None)
    is_account_non_locked: bool | None = Field(default=None)
    is_credentials_non_expired: bool | None = Field(default=None)
    user: User | None = Field(default=None, repr=False)

    def __eq__(self, other: Any) -> bool:
        """Compare credentials by their attributes, ignoring the owning user."""
        if not isinstance(other, Credential):
            return False

        return (
            self.credential_id == other.credential_id
            and self.username == other.username
            and self.password == other.password
            and self.role_based_authority == other.role_based_authority
            and self.is_enabled == other.is_enabled
            and self.is_account_non_expired == other.is_account_non_expired
            and self.is_account_non_locked == other.is_account_non_locked
            and self.is_credentials_non_expired == other.is_credentials_non_expired
        )

    def __hash__(self) -> int:
        return hash((self.credential_id, self.username, self.role_based_authority))


class Address(Entity):
    """Postal address belonging to one user."""

    address_id: int | None = Field(default=None, description="Storage-assigned identity")
    full_address: str | None = Field(default=None, description="Street and number")
    postal_code: str | None = Field(default=None, description="Postal code")
    city: str | None = Field(default=None, description="City")
    user: User | None = Field(default=None, repr=False)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Address):
            return False

        return (
            self.address_id == other.address_id
            and self.full_address == other.full_address
            and self.postal_code == other.postal_code
            and self.city == other.city
        )

    def __hash__(self) -> int:
        return hash((self.address_id, self.full_address, self.postal_code, self.city))


class VerificationToken(Entity):
    """Opaque token used to verify a credential, valid until ``expire_date``."""

    verification_token_id: int | None = Field(default=None, description="Storage-assigned identity")
    token: str | None = Field(default=None, description="Opaque token value")
    expire_date: date | None = Field(default=None, description="Last valid day")
    credential: Credential | None = Field(default=None)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, VerificationToken):
            return False

        return (
            self.verification_token_id == other.verification_token_id
            and self.token == other.token
            and self.expire_date == other.expire_date
        )

    def __hash__(self) -> int:
        return hash((self.verification_token_id, self.token, self.expire_date))


User.model_rebuild()
Credential.model_rebuild()
Address.model_rebuild()
VerificationToken.model_rebuild()
