"""Errors raised by the identity services.

All of them propagate to the caller; the resource layer decides how each one
is presented to clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.user_service.core.relationships import CascadeStep


class IdentityServiceError(Exception):
    """Base class for identity service errors."""


class AggregateNotFoundError(IdentityServiceError):
    """A lookup by identifier or username matched nothing."""

    aggregate = "Aggregate"

    def __init__(self, key: Any, field: str = "id") -> None:
        self.key = key
        self.field = field
        super().__init__(f"{self.aggregate} with {field}: {key} not found")


class UserNotFoundError(AggregateNotFoundError):
    aggregate = "User"


class CredentialNotFoundError(AggregateNotFoundError):
    aggregate = "Credential"


class AddressNotFoundError(AggregateNotFoundError):
    aggregate = "Address"


class VerificationTokenNotFoundError(AggregateNotFoundError):
    aggregate = "VerificationToken"


class InvalidPayloadError(IdentityServiceError, ValueError):
    """A payload needed to resolve an existing aggregate is missing or has no identity."""


class CascadeInconsistencyError(IdentityServiceError):
    """A dependent removal failed after the owner's removal was requested.

    The store may now hold orphaned rows; this is not recoverable here.
    """

    def __init__(self, owner: str, step: CascadeStep) -> None:
        self.owner = owner
        self.step = step
        super().__init__(
            f"Removed {owner} but failed to remove dependent "
            f"{step.aggregate} with id: {step.identifier}"
        )
