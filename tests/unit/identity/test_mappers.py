"""Unit tests for the transfer mappers."""

from datetime import date

import pytest

from src.user_service.core.mappers import (
    AddressMapper,
    CredentialMapper,
    UserMapper,
    VerificationTokenMapper,
)
from src.user_service.core.models import (
    AddressDto,
    CredentialDto,
    UserDto,
    VerificationTokenDto,
)
from src.user_service.entities.core.domain import (
    Credential,
    RoleBasedAuthority,
    User,
    VerificationToken,
)


class TestNoneHandling:
    """None in, None out, for every mapper and direction."""

    @pytest.mark.parametrize(
        "mapper", [UserMapper, CredentialMapper, AddressMapper, VerificationTokenMapper]
    )
    def test_none_maps_to_none(self, mapper):
        assert mapper.to_transfer(None) is None
        assert mapper.to_domain(None) is None

    def test_minimal_token_none_maps_to_none(self):
        assert VerificationTokenMapper.to_transfer_minimal(None) is None
        assert VerificationTokenMapper.to_domain_minimal(None) is None


class TestUserMapper:
    def test_alice_round_trip(self, alice_dto: UserDto):
        """The transfer object survives a trip through the domain unchanged."""
        user = UserMapper.to_domain(alice_dto)
        result = UserMapper.to_transfer(user)

        assert result == alice_dto
        assert result.credential_dto.username == "alice"
        assert result.credential_dto.user_dto is None
        assert result.address_dtos[0].user_dto is None

    def test_to_domain_links_both_ways(self, alice_dto: UserDto):
        user = UserMapper.to_domain(alice_dto)

        assert user.credential.user is user
        assert user.addresses[0].user is user
        assert user.addresses[0].city == "Springfield"

    def test_absent_relationships_stay_absent(self):
        user = UserMapper.to_domain(UserDto(user_id=5, first_name="Bob"))

        assert user.credential is None
        assert user.addresses == []

        dto = UserMapper.to_transfer(user)
        assert dto.credential_dto is None
        assert dto.address_dtos is None

    def test_domain_round_trip(self, stored_user: User):
        result = UserMapper.to_domain(UserMapper.to_transfer(stored_user))

        assert result == stored_user
        assert result.credential == stored_user.credential
        assert result.addresses == stored_user.addresses


class TestCredentialMapper:
    def test_to_domain_restores_back_reference(self):
        dto = CredentialDto(
            credential_id=3,
            username="carol",
            role_based_authority=RoleBasedAuthority.ROLE_ADMIN,
            user_dto=UserDto(user_id=7, first_name="Carol"),
        )

        credential = CredentialMapper.to_domain(dto)

        assert credential.user.user_id == 7
        assert credential.user.credential is credential

    def test_to_domain_without_user(self):
        credential = CredentialMapper.to_domain(CredentialDto(username="dave"))

        assert credential.user is None
        assert credential.username == "dave"

    def test_to_transfer_expands_user_one_level(self, stored_user: User):
        dto = CredentialMapper.to_transfer(stored_user.credential)

        assert dto.credential_id == 1
        assert dto.user_dto.user_id == 1
        assert dto.user_dto.credential_dto is None
        assert dto.user_dto.address_dtos is None

    def test_wire_names_are_camel_case(self, stored_user: User):
        wire = CredentialMapper.to_transfer(stored_user.credential).to_wire()

        assert wire["credentialId"] == 1
        assert wire["roleBasedAuthority"] == "ROLE_USER"
        assert wire["isAccountNonLocked"] is True
        assert wire["userDto"]["firstName"] == "Alice"

    def test_accepts_wire_names(self):
        dto = CredentialDto.model_validate(
            {"credentialId": 4, "username": "erin", "isEnabled": False}
        )

        credential = CredentialMapper.to_domain(dto)

        assert credential == Credential(credential_id=4, username="erin", is_enabled=False)


class TestAddressMapper:
    def test_to_domain_lists_address_under_user(self):
        dto = AddressDto(
            address_id=2, full_address="1 Elm St", user_dto=UserDto(user_id=9)
        )

        address = AddressMapper.to_domain(dto)

        assert address.user.user_id == 9
        assert address.user.addresses == [address]

    def test_to_transfer_without_user(self):
        dto = AddressMapper.to_transfer(
            AddressMapper.to_domain(AddressDto(address_id=2, city="Paris"))
        )

        assert dto == AddressDto(address_id=2, city="Paris")
        assert dto.user_dto is None


class TestVerificationTokenMapper:
    def test_round_trip(self, token_dto: VerificationTokenDto):
        token = VerificationTokenMapper.to_domain(token_dto)

        assert token.credential.credential_id == 1
        assert token.expire_date == date(2030, 1, 31)
        assert VerificationTokenMapper.to_transfer(token) == token_dto

    def test_minimal_drops_credential(self, stored_token: VerificationToken):
        dto = VerificationTokenMapper.to_transfer_minimal(stored_token)

        assert dto.token == "tok-123"
        assert dto.credential_dto is None
        assert "credential_dto" in dto.model_fields_set

    def test_minimal_to_domain_drops_credential(self, token_dto: VerificationTokenDto):
        token = VerificationTokenMapper.to_domain_minimal(token_dto)

        assert token.verification_token_id is None
        assert token.token == "tok-123"
        assert token.credential is None

    def test_wire_date_format(self, stored_token: VerificationToken):
        wire = VerificationTokenMapper.to_transfer_minimal(stored_token).to_wire()

        assert wire == {
            "verificationTokenId": 1,
            "token": "tok-123",
            "expireDate": "2030-01-31",
        }
