"""Credential CLI commands."""

import typer
from rich.table import Table

from .utils import console, identity_services

credentials_app = typer.Typer(help="🔑 Credential commands")


@credentials_app.command("show")
def show_credential(
    username: str = typer.Argument(..., help="Username of the credential"),
) -> None:
    """🔍 Show a credential's status flags. The password is never printed."""
    with identity_services() as services:
        credential = services.credentials.find_by_username(username)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("ID", str(credential.credential_id))
    table.add_row("Username", credential.username or "")
    table.add_row(
        "Role",
        credential.role_based_authority.value if credential.role_based_authority else "-",
    )
    for label, flag in (
        ("Enabled", credential.is_enabled),
        ("Account non-expired", credential.is_account_non_expired),
        ("Account non-locked", credential.is_account_non_locked),
        ("Credentials non-expired", credential.is_credentials_non_expired),
    ):
        table.add_row(label, "✅" if flag else "❌")
    if credential.user_dto is not None:
        table.add_row("User ID", str(credential.user_dto.user_id))

    console.print(table)
