"""Credential database table model."""

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, String
from sqlmodel import Field

from src.user_service.entities._base import EntityTable
from src.user_service.entities.core.domain import RoleBasedAuthority


class CredentialTable(EntityTable, table=True):
    """Database persistence model for credentials.

    The credential row owns the User↔Credential relationship: ``user_id`` is
    unique so a user has at most one credential. Removing the user only
    detaches the credential (``SET NULL``); the user service deletes it
    afterwards by credential id.
    """

    credential_id: int | None = Field(default=None, primary_key=True)
    username: str | None = Field(
        default=None, sa_column=Column(String(255), unique=True, index=True)
    )
    password: str | None = None
    role_based_authority: RoleBasedAuthority | None = Field(
        default=None, sa_column=Column(Enum(RoleBasedAuthority), nullable=True)
    )
    is_enabled: bool | None = Field(default=None, sa_column=Column(Boolean))
    is_account_non_expired: bool | None = Field(default=None, sa_column=Column(Boolean))
    is_account_non_locked: bool | None = Field(default=None, sa_column=Column(Boolean))
    is_credentials_non_expired: bool | None = Field(
        default=None, sa_column=Column(Boolean)
    )
    user_id: int | None = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("usertable.user_id", ondelete="SET NULL"),
            unique=True,
            nullable=True,
            index=True,
        ),
    )
