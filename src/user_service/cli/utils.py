"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console

from src.user_service.core.exceptions import IdentityServiceError
from src.user_service.core.services.database.db_session import DbSessionService
from src.user_service.core.services.identity import IdentityServices, build_identity_services

console = Console()


def get_db_session_service() -> DbSessionService:
    """Build the session service from the active configuration."""
    return DbSessionService()


@contextmanager
def identity_services() -> Iterator[IdentityServices]:
    """Yield services bound to one committed-on-success session.

    Service errors are printed and turned into exit code 1.
    """
    try:
        with get_db_session_service().session_scope() as session:
            yield build_identity_services(session)
    except IdentityServiceError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1) from None
