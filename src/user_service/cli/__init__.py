"""Admin CLI for the user service."""

import typer

from src.user_service.core.services.database.db_manage import DbManageService
from src.user_service.utils.app_startup import configure_logging

from . import utils
from .credential_commands import credentials_app
from .user_commands import users_app
from .utils import console

app = typer.Typer(
    help="🛠️  User service admin CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(users_app, name="users")
app.add_typer(credentials_app, name="credentials")


@app.callback()
def startup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(level="DEBUG" if verbose else None)


@app.command("init-db")
def init_db() -> None:
    """🗄️ Create all database tables."""
    DbManageService(utils.get_db_session_service()).create_all()
    console.print("[green]✅ Database tables created[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
