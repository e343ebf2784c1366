"""Entity package: Address."""

from .table import AddressTable
from .repository import AddressRepository

__all__ = ["AddressRepository", "AddressTable"]
