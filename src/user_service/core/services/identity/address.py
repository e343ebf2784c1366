"""Address service."""

from src.user_service.core.exceptions import AddressNotFoundError
from src.user_service.core.mappers import AddressMapper
from src.user_service.core.models import AddressDto
from src.user_service.core.services.identity.base import AggregateService
from src.user_service.entities.core.domain import Address


class AddressService(AggregateService[Address, AddressDto]):
    aggregate_name = "Address"
    identity_field = "address_id"
    not_found_error = AddressNotFoundError

    def _to_transfer(self, aggregate: Address) -> AddressDto:
        return AddressMapper.to_transfer(aggregate)

    def _to_domain(self, payload: AddressDto) -> Address:
        return AddressMapper.to_domain(payload)

    def _merge(self, existing: Address, payload: AddressDto) -> Address:
        return self._merger.merge_address(existing, payload)
