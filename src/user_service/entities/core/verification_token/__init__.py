"""Entity package: VerificationToken."""

from .table import VerificationTokenTable
from .repository import VerificationTokenRepository

__all__ = ["VerificationTokenRepository", "VerificationTokenTable"]
