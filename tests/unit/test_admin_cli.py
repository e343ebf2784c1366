"""Tests for the admin CLI."""

import pytest
from typer.testing import CliRunner

import src.user_service.cli as cli
from src.user_service.cli import app
from src.user_service.core.models import UserDto
from src.user_service.core.services import DbSessionService, build_identity_services
from src.user_service.runtime.config.config_data import ConfigData, DatabaseConfig

runner = CliRunner()


@pytest.fixture
def db(monkeypatch) -> DbSessionService:
    """One in-memory database shared by every command in a test."""
    service = DbSessionService(ConfigData(database=DatabaseConfig(url="sqlite://")))
    monkeypatch.setattr(cli.utils, "get_db_session_service", lambda: service)
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    result = runner.invoke(app, ["init-db"])
    assert result.exit_code == 0, result.output
    return service


@pytest.fixture
def alice_id(db: DbSessionService, alice_dto: UserDto) -> int:
    with db.session_scope() as session:
        return build_identity_services(session).users.save(alice_dto).user_id


class TestUsersCommands:
    def test_list_empty(self, db):
        result = runner.invoke(app, ["users", "list"])

        assert result.exit_code == 0
        assert "No users found" in result.output

    def test_list(self, alice_id):
        result = runner.invoke(app, ["users", "list"])

        assert result.exit_code == 0
        assert "Alice" in result.output
        assert "alice@example.com" in result.output

    def test_show(self, alice_id):
        result = runner.invoke(app, ["users", "show", str(alice_id)])

        assert result.exit_code == 0
        assert "Springfield" in result.output
        assert "ROLE_USER" in result.output

    def test_show_missing_user(self, db):
        result = runner.invoke(app, ["users", "show", "999"])

        assert result.exit_code == 1
        assert "User with id: 999 not found" in result.output

    def test_delete_with_force(self, alice_id):
        result = runner.invoke(app, ["users", "delete", str(alice_id), "--force"])

        assert result.exit_code == 0
        missing = runner.invoke(app, ["credentials", "show", "alice"])
        assert missing.exit_code == 1

    def test_delete_cancelled(self, alice_id):
        result = runner.invoke(app, ["users", "delete", str(alice_id)], input="n\n")

        assert result.exit_code == 0
        assert "cancelled" in result.output
        assert runner.invoke(app, ["users", "show", str(alice_id)]).exit_code == 0


class TestCredentialsCommands:
    def test_show(self, alice_id):
        result = runner.invoke(app, ["credentials", "show", "alice"])

        assert result.exit_code == 0
        assert "alice" in result.output
        assert "s3cret" not in result.output

    def test_show_missing(self, db):
        result = runner.invoke(app, ["credentials", "show", "ghost"])

        assert result.exit_code == 1
        assert "ghost" in result.output


class TestGlobalOptions:
    def test_verbose_lowers_log_level(self, db, monkeypatch):
        levels = []
        monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: levels.append(kwargs["level"]))

        result = runner.invoke(app, ["--verbose", "users", "list"])

        assert result.exit_code == 0
        assert levels == ["DEBUG"]

    def test_default_level_comes_from_config(self, db, monkeypatch):
        levels = []
        monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: levels.append(kwargs["level"]))

        runner.invoke(app, ["users", "list"])

        assert levels == [None]
