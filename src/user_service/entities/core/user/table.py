"""User database table model."""

from sqlmodel import Field

from src.user_service.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    Credential and address rows reference this table; the user row itself
    carries only profile data.
    """

    user_id: int | None = Field(default=None, primary_key=True)
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None
    email: str | None = None
    phone: str | None = None
