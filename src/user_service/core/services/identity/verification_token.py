"""Verification token service."""

from src.user_service.core.exceptions import VerificationTokenNotFoundError
from src.user_service.core.mappers import VerificationTokenMapper
from src.user_service.core.models import VerificationTokenDto
from src.user_service.core.services.identity.base import AggregateService
from src.user_service.entities.core.domain import VerificationToken


class VerificationTokenService(AggregateService[VerificationToken, VerificationTokenDto]):
    aggregate_name = "VerificationToken"
    identity_field = "verification_token_id"
    not_found_error = VerificationTokenNotFoundError

    def _to_transfer(self, aggregate: VerificationToken) -> VerificationTokenDto:
        return VerificationTokenMapper.to_transfer(aggregate)

    def _to_domain(self, payload: VerificationTokenDto) -> VerificationToken:
        return VerificationTokenMapper.to_domain(payload)

    def _merge(
        self, existing: VerificationToken, payload: VerificationTokenDto
    ) -> VerificationToken:
        return self._merger.merge_verification_token(existing, payload)
