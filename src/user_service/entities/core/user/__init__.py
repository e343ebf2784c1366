"""Entity package: User."""

from .table import UserTable
from .repository import UserRepository

__all__ = ["UserRepository", "UserTable"]
