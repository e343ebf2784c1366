"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .identity import IdentityServices, build_identity_services

__all__ = [
    "DbManageService",
    "DbSessionService",
    "IdentityServices",
    "build_identity_services",
]
