"""Tests for the SQLModel repositories against an in-memory database."""

from datetime import date

import pytest
from sqlmodel import Session, select

from src.user_service.core.exceptions import InvalidPayloadError
from src.user_service.core.relationships import RelationshipCoordinator
from src.user_service.entities.core.address import AddressRepository, AddressTable
from src.user_service.entities.core.credential import CredentialRepository, CredentialTable
from src.user_service.entities.core.domain import (
    Address,
    Credential,
    RoleBasedAuthority,
    User,
    VerificationToken,
)
from src.user_service.entities.core.user import UserRepository, UserTable
from src.user_service.entities.core.verification_token import (
    VerificationTokenRepository,
    VerificationTokenTable,
)


def _new_alice() -> User:
    user = User(first_name="Alice", last_name="Liddell", email="alice@example.com")
    RelationshipCoordinator.attach_credential(
        user,
        Credential(
            username="alice",
            password="s3cret",
            role_based_authority=RoleBasedAuthority.ROLE_USER,
            is_enabled=True,
        ),
    )
    RelationshipCoordinator.attach_address(
        user, Address(full_address="123 Main St", postal_code="12345", city="Springfield")
    )
    return user


class TestUserRepository:
    @pytest.fixture
    def repo(self, session: Session) -> UserRepository:
        return UserRepository(session)

    def test_save_assigns_identities(self, repo: UserRepository):
        saved = repo.save(_new_alice())

        assert saved.user_id is not None
        assert saved.credential.credential_id is not None
        assert saved.addresses[0].address_id is not None
        assert saved.credential.user is saved
        assert saved.addresses[0].user is saved

    def test_credential_row_references_user(self, repo: UserRepository, session: Session):
        saved = repo.save(_new_alice())

        row = session.exec(select(CredentialTable)).one()
        assert row.user_id == saved.user_id
        assert row.role_based_authority is RoleBasedAuthority.ROLE_USER

    def test_find_by_id_returns_linked_graph(self, repo: UserRepository):
        saved = repo.save(_new_alice())

        found = repo.find_by_id(saved.user_id)

        assert found == saved
        assert found.credential.username == "alice"
        assert found.credential.user is found
        assert [address.city for address in found.addresses] == ["Springfield"]

    def test_find_by_id_missing(self, repo: UserRepository):
        assert repo.find_by_id(999) is None

    def test_find_by_credential_username(self, repo: UserRepository):
        saved = repo.save(_new_alice())

        assert repo.find_by_credential_username("alice") == saved
        assert repo.find_by_credential_username("nobody") is None

    def test_find_all_in_id_order(self, repo: UserRepository):
        first = repo.save(User(first_name="A"))
        second = repo.save(User(first_name="B"))

        assert [user.user_id for user in repo.find_all()] == [first.user_id, second.user_id]

    def test_save_updates_in_place(self, repo: UserRepository, session: Session):
        saved = repo.save(_new_alice())
        changed = saved.model_copy(update={"phone": "555-0199"})
        changed.credential = saved.credential.model_copy(update={"password": "n3w"})
        RelationshipCoordinator().link(changed)

        updated = repo.save(changed)

        assert updated.user_id == saved.user_id
        assert updated.phone == "555-0199"
        assert updated.credential.credential_id == saved.credential.credential_id
        assert updated.credential.password == "n3w"
        assert len(session.exec(select(UserTable)).all()) == 1
        assert len(session.exec(select(CredentialTable)).all()) == 1

    def test_save_synchronises_addresses(self, repo: UserRepository, session: Session):
        saved = repo.save(_new_alice())
        changed = saved.model_copy()
        changed.addresses = [Address(city="Rome")]
        RelationshipCoordinator().link(changed)

        updated = repo.save(changed)

        assert [address.city for address in updated.addresses] == ["Rome"]
        assert len(session.exec(select(AddressTable)).all()) == 1

    def test_delete_removes_user_and_addresses(self, repo: UserRepository, session: Session):
        saved = repo.save(_new_alice())

        repo.delete_by_id(saved.user_id)

        assert repo.find_by_id(saved.user_id) is None
        assert session.exec(select(AddressTable)).all() == []

    def test_delete_detaches_credential(self, repo: UserRepository, session: Session):
        """The credential row outlives the user row until it is removed by id."""
        saved = repo.save(_new_alice())

        repo.delete_by_id(saved.user_id)
        session.expire_all()

        row = session.exec(select(CredentialTable)).one()
        assert row.credential_id == saved.credential.credential_id
        assert row.user_id is None

    def test_save_rejects_address_of_another_user(
        self, repo: UserRepository, session: Session
    ):
        alice = repo.save(_new_alice())
        bob = repo.save(User(first_name="Bob", addresses=[Address(city="Paris")]))
        bob_address_id = bob.addresses[0].address_id
        changed = alice.model_copy()
        changed.addresses = [Address(address_id=bob_address_id, city="X")]
        RelationshipCoordinator().link(changed)

        with pytest.raises(InvalidPayloadError, match=f"Address with id: {bob_address_id}"):
            repo.save(changed)

        row = session.exec(
            select(AddressTable).where(AddressTable.address_id == bob_address_id)
        ).one()
        assert row.user_id == bob.user_id
        assert row.city == "Paris"

    def test_save_rejects_credential_of_another_user(
        self, repo: UserRepository, session: Session
    ):
        alice = repo.save(_new_alice())
        bob = User(first_name="Bob")
        RelationshipCoordinator.attach_credential(bob, Credential(username="bob"))
        bob = repo.save(bob)
        bob_credential_id = bob.credential.credential_id
        changed = alice.model_copy()
        changed.credential = Credential(credential_id=bob_credential_id, username="x")
        RelationshipCoordinator().link(changed)

        with pytest.raises(
            InvalidPayloadError, match=f"Credential with id: {bob_credential_id}"
        ):
            repo.save(changed)

        assert repo.find_by_id(bob.user_id).credential.username == "bob"
        assert repo.find_by_id(alice.user_id).credential.username == "alice"

    def test_save_rejects_second_credential(self, repo: UserRepository, session: Session):
        alice = repo.save(_new_alice())
        spare = CredentialRepository(session).save(Credential(username="spare"))
        changed = alice.model_copy()
        changed.credential = Credential(credential_id=spare.credential_id, username="spare")
        RelationshipCoordinator().link(changed)

        with pytest.raises(InvalidPayloadError, match="already owns a credential"):
            repo.save(changed)

    def test_save_adopts_unowned_address(self, repo: UserRepository, session: Session):
        loose = AddressRepository(session).save(Address(city="Lima"))
        user = User(
            first_name="Ivy", addresses=[Address(address_id=loose.address_id, city="Lima")]
        )

        saved = repo.save(user)

        assert [address.address_id for address in saved.addresses] == [loose.address_id]


class TestCredentialRepository:
    @pytest.fixture
    def repo(self, session: Session) -> CredentialRepository:
        return CredentialRepository(session)

    def test_save_with_new_user_stores_owner(self, repo: CredentialRepository, session: Session):
        credential = Credential(username="bob", password="pw")
        RelationshipCoordinator.attach_credential(User(first_name="Bob"), credential)

        saved = repo.save(credential)

        assert saved.credential_id is not None
        assert saved.user.user_id is not None
        assert saved.user.first_name == "Bob"
        assert saved.user.credential is saved
        assert len(session.exec(select(UserTable)).all()) == 1

    def test_find_by_username(self, repo: CredentialRepository):
        saved = repo.save(Credential(username="carol"))

        assert repo.find_by_username("carol") == saved
        assert repo.find_by_username("dave") is None

    def test_delete_by_credential_id(self, repo: CredentialRepository):
        saved = repo.save(Credential(username="erin"))

        repo.delete_by_credential_id(saved.credential_id)

        assert repo.find_by_id(saved.credential_id) is None

    def test_delete_unknown_id_is_a_no_op(self, repo: CredentialRepository):
        repo.delete_by_id(12345)

    def test_username_is_unique(self, repo: CredentialRepository):
        from sqlalchemy.exc import IntegrityError

        repo.save(Credential(username="frank"))

        with pytest.raises(IntegrityError):
            repo.save(Credential(username="frank"))


class TestAddressRepository:
    def test_save_uses_owner_key(self, session: Session):
        owner = UserRepository(session).save(User(first_name="Gina"))
        address = Address(city="Oslo")
        RelationshipCoordinator.attach_address(owner, address)

        saved = AddressRepository(session).save(address)

        row = session.exec(select(AddressTable)).one()
        assert row.user_id == owner.user_id
        assert saved.user.user_id == owner.user_id
        assert saved.user.addresses == [saved]

    def test_unowned_address(self, session: Session):
        repo = AddressRepository(session)

        saved = repo.save(Address(city="Lima"))

        assert repo.find_by_id(saved.address_id).user is None
        assert [address.city for address in repo.find_all()] == ["Lima"]


class TestVerificationTokenRepository:
    def test_save_and_find(self, session: Session):
        credential = CredentialRepository(session).save(Credential(username="hal"))
        token = VerificationToken(token="abc", expire_date=date(2030, 1, 1))
        RelationshipCoordinator.attach_verification_token(credential, token)
        repo = VerificationTokenRepository(session)

        saved = repo.save(token)
        found = repo.find_by_id(saved.verification_token_id)

        assert found == saved
        assert found.expire_date == date(2030, 1, 1)
        assert found.credential.credential_id == credential.credential_id
        row = session.exec(select(VerificationTokenTable)).one()
        assert row.credential_id == credential.credential_id

    def test_delete(self, session: Session):
        repo = VerificationTokenRepository(session)
        saved = repo.save(VerificationToken(token="xyz"))

        repo.delete_by_id(saved.verification_token_id)

        assert repo.find_all() == []
