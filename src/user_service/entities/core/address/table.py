"""Address database table model."""

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field

from src.user_service.entities._base import EntityTable


class AddressTable(EntityTable, table=True):
    """Database persistence model for addresses."""

    address_id: int | None = Field(default=None, primary_key=True)
    full_address: str | None = None
    postal_code: str | None = None
    city: str | None = None
    user_id: int | None = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("usertable.user_id", ondelete="CASCADE"),
            nullable=True,
            index=True,
        ),
    )
