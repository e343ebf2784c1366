"""Stateless converters between domain aggregates and transfer objects.

Every mapper returns ``None`` for ``None`` input in both directions, and a
missing nested relationship stays missing on the other side.
"""

from .address import AddressMapper
from .credential import CredentialMapper
from .user import UserMapper
from .verification_token import VerificationTokenMapper

__all__ = ["UserMapper", "CredentialMapper", "AddressMapper", "VerificationTokenMapper"]
