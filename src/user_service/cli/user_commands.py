"""User management CLI commands."""

import typer
from rich.panel import Panel
from rich.table import Table

from src.user_service.core.models import UserDto

from .utils import console, identity_services

users_app = typer.Typer(help="👥 User management commands")


def _user_panel(user: UserDto) -> Panel:
    credential = user.credential_dto
    lines = [
        f"[bold]Name:[/bold] {user.first_name or ''} {user.last_name or ''}".rstrip(),
        f"[bold]Email:[/bold] {user.email or '-'}",
        f"[bold]Phone:[/bold] {user.phone or '-'}",
        f"[bold]Username:[/bold] {credential.username if credential else '-'}",
        f"[bold]Role:[/bold] {credential.role_based_authority.value if credential and credential.role_based_authority else '-'}",
    ]
    for address in user.address_dtos or []:
        lines.append(
            f"[bold]Address:[/bold] {address.full_address or ''}, "
            f"{address.postal_code or ''} {address.city or ''}".rstrip()
        )
    return Panel.fit(
        "\n".join(lines),
        title=f"[bold cyan]User {user.user_id}[/bold cyan]",
        border_style="cyan",
    )


@users_app.command("list")
def list_users() -> None:
    """
    📋 List stored users.

    Shows a table with each user's id, name, email and username.
    """
    with identity_services() as services:
        users = services.users.find_all()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan")
    table.add_column("First Name", style="blue")
    table.add_column("Last Name", style="blue")
    table.add_column("Email", style="green")
    table.add_column("Username", style="yellow")

    for user in users:
        table.add_row(
            str(user.user_id),
            user.first_name or "",
            user.last_name or "",
            user.email or "",
            (user.credential_dto.username or "") if user.credential_dto else "",
        )

    console.print(table)
    console.print(f"\n[dim]Showing {len(users)} users[/dim]")


@users_app.command("show")
def show_user(
    user_id: int = typer.Argument(..., help="ID of the user to show"),
) -> None:
    """🔍 Show one user with credential and addresses."""
    with identity_services() as services:
        user = services.users.find_by_id(user_id)
    console.print(_user_panel(user))


@users_app.command("delete")
def delete_user(
    user_id: int = typer.Argument(..., help="ID of the user to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """
    🗑️ Delete a user together with its credential.

    Addresses of the user are removed as well.
    """
    if not force and not typer.confirm(f"Delete user {user_id} and its credential?"):
        console.print("[yellow]Deletion cancelled[/yellow]")
        return

    with identity_services() as services:
        services.users.delete_by_id(user_id)
    console.print(f"[green]✅ User {user_id} deleted[/green]")
