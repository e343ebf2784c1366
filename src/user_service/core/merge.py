"""Sparse merge of update payloads into persisted aggregates.

A payload field overwrites the existing value only when the caller supplied it
(it is in the payload's ``model_fields_set``) and its value is not ``None``.
An explicit ``None`` therefore means "leave unchanged", exactly like an
omitted field, while an empty string is a real value and is applied.

Identity is never read from the payload. The merged aggregate keeps the
identity of ``existing``, which the service resolved from its lookup key.

Nested relationships are not merged field by field: a supplied nested transfer
object replaces the relationship, an absent one keeps the existing
relationship. Kept relationships are copied before they are re-linked to the
merged aggregate, so ``existing`` and ``incoming`` are never modified.
"""

from pydantic import BaseModel

from src.user_service.core.mappers._fields import (
    address_to_domain,
    credential_to_domain,
    user_to_domain,
)
from src.user_service.core.models.transfer import (
    AddressDto,
    CredentialDto,
    UserDto,
    VerificationTokenDto,
)
from src.user_service.core.relationships import RelationshipCoordinator
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


def supplied_values(incoming: BaseModel, fields: tuple[str, ...]) -> dict:
    """Return the scalar values the caller actually supplied, minus the identity."""
    supplied = incoming.model_fields_set
    return {
        name: getattr(incoming, name)
        for name in fields[1:]
        if name in supplied and getattr(incoming, name) is not None
    }


class PartialUpdateMerger:
    """Stateless merger, one method per aggregate type."""

    def __init__(self, coordinator: RelationshipCoordinator | None = None) -> None:
        self._coordinator = coordinator or RelationshipCoordinator()

    def merge_user(self, existing: User, incoming: UserDto) -> User:
        merged = existing.model_copy(update=supplied_values(incoming, USER_FIELDS))

        if incoming.credential_dto is not None:
            merged.credential = credential_to_domain(incoming.credential_dto)
        elif existing.credential is not None:
            merged.credential = existing.credential.model_copy()

        if incoming.address_dtos is not None:
            merged.addresses = [address_to_domain(dto) for dto in incoming.address_dtos]
        else:
            merged.addresses = [address.model_copy() for address in existing.addresses]

        return self._coordinator.link(merged)

    def merge_credential(self, existing: Credential, incoming: CredentialDto) -> Credential:
        merged = existing.model_copy(update=supplied_values(incoming, CREDENTIAL_FIELDS))

        if incoming.user_dto is not None:
            merged.user = user_to_domain(incoming.user_dto)
        elif existing.user is not None:
            merged.user = existing.user.model_copy()

        return self._coordinator.link(merged)

    def merge_address(self, existing: Address, incoming: AddressDto) -> Address:
        merged = existing.model_copy(update=supplied_values(incoming, ADDRESS_FIELDS))

        if incoming.user_dto is not None:
            merged.user = user_to_domain(incoming.user_dto)
        elif existing.user is not None:
            merged.user = existing.user.model_copy()

        return self._coordinator.link(merged)

    def merge_verification_token(
        self, existing: VerificationToken, incoming: VerificationTokenDto
    ) -> VerificationToken:
        merged = existing.model_copy(
            update=supplied_values(incoming, VERIFICATION_TOKEN_FIELDS)
        )

        # The token -> credential link is one-sided, so the existing credential
        # can be shared without touching it.
        if incoming.credential_dto is not None:
            merged.credential = credential_to_domain(incoming.credential_dto)

        return merged
