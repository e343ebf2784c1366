"""Schema management for the identity tables."""

from loguru import logger
from sqlmodel import SQLModel

from src.user_service.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, db_session_service: DbSessionService | None = None):
        self._db_session_service = db_session_service or DbSessionService()

    def create_all(self) -> None:
        """Create all database tables."""
        from src.user_service.entities.core.address import AddressTable  # noqa: F401
        from src.user_service.entities.core.credential import CredentialTable  # noqa: F401
        from src.user_service.entities.core.user import UserTable  # noqa: F401
        from src.user_service.entities.core.verification_token import (  # noqa: F401
            VerificationTokenTable,
        )

        SQLModel.metadata.create_all(self._db_session_service.engine)
        logger.info("Database initialized with tables.")
