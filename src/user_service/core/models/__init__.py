"""Transfer objects for the identity aggregates."""

from .transfer import AddressDto, CredentialDto, UserDto, VerificationTokenDto

__all__ = ["UserDto", "CredentialDto", "AddressDto", "VerificationTokenDto"]
