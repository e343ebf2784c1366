"""Database initialization script."""

from src.user_service.core.services.database.db_manage import DbManageService
from src.user_service.utils.app_startup import configure_logging


def init_db() -> None:
    """Create all database tables."""
    DbManageService().create_all()


if __name__ == "__main__":
    configure_logging()
    init_db()
