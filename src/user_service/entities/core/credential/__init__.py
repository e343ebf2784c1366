"""Entity package: Credential."""

from .table import CredentialTable
from .repository import CredentialRepository

__all__ = ["CredentialRepository", "CredentialTable"]
