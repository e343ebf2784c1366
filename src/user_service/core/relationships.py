"""Ownership links between aggregates and the cascades they imply.

Back-references are set explicitly here instead of being left to an ORM, so a
store keyed by the owning side's foreign key can always see which row owns a
relationship.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from src.user_service.core.exceptions import CascadeInconsistencyError
from src.user_service.entities.core.domain import (
    Address,
    Credential,
    User,
    VerificationToken,
)

Aggregate = User | Credential | Address | VerificationToken


@dataclass(frozen=True)
class CascadeStep:
    """A dependent aggregate to remove, identified by its key value."""

    aggregate: str
    identifier: int


class RelationshipCoordinator:
    """Stateless helper keeping both ends of every ownership link consistent."""

    @staticmethod
    def attach_credential(user: User, credential: Credential) -> None:
        user.credential = credential
        credential.user = user

    @staticmethod
    def attach_address(user: User, address: Address) -> None:
        """Point ``address`` at ``user`` and list it among the user's addresses.

        An address already listed under the same identity is replaced in
        place. The collection is rebuilt rather than mutated.
        """
        address.user = user
        addresses: list[Address] = []
        placed = False
        for current in user.addresses:
            same = current is address or (
                address.address_id is not None
                and current.address_id == address.address_id
            )
            if same:
                if not placed:
                    addresses.append(address)
                    placed = True
                continue
            addresses.append(current)
        if not placed:
            addresses.append(address)
        user.addresses = addresses

    @staticmethod
    def attach_verification_token(
        credential: Credential, token: VerificationToken
    ) -> None:
        # Credentials do not list their tokens; the link is one-sided.
        token.credential = credential

    def link(self, aggregate: Aggregate) -> Aggregate:
        """Populate the inverse side of every relationship ``aggregate`` holds."""
        if isinstance(aggregate, User):
            if aggregate.credential is not None:
                aggregate.credential.user = aggregate
            aggregate.addresses = list(aggregate.addresses)
            for address in aggregate.addresses:
                address.user = aggregate
        elif isinstance(aggregate, Credential):
            if aggregate.user is not None:
                aggregate.user.credential = aggregate
        elif isinstance(aggregate, Address):
            if aggregate.user is not None:
                self.attach_address(aggregate.user, aggregate)
        elif not isinstance(aggregate, VerificationToken):
            raise TypeError(f"Unsupported aggregate type: {type(aggregate).__name__}")
        return aggregate

    @staticmethod
    def plan_deletion(aggregate: Aggregate) -> list[CascadeStep]:
        """Return the dependents that must be removed together with ``aggregate``.

        Only a user's credential is strictly owned; it is identified by its
        key value so that the removal does not depend on object identity.
        """
        if isinstance(aggregate, User):
            credential = aggregate.credential
            if credential is not None and credential.credential_id is not None:
                return [CascadeStep("Credential", credential.credential_id)]
        return []

    @staticmethod
    def execute_deletion(
        owner: str,
        primary: Callable[[], None],
        steps: Sequence[CascadeStep],
        remove: Callable[[CascadeStep], None],
    ) -> None:
        """Remove the owner, then each dependent.

        Errors from the primary removal propagate unchanged. A dependent
        failure raises :class:`CascadeInconsistencyError` chained to the cause.
        """
        primary()
        for step in steps:
            try:
                remove(step)
            except Exception as exc:
                logger.error(
                    "Cascade from {} failed removing {} {}: {}",
                    owner,
                    step.aggregate,
                    step.identifier,
                    exc,
                )
                raise CascadeInconsistencyError(owner, step) from exc
            logger.debug("Cascade from {} removed {} {}", owner, step.aggregate, step.identifier)
