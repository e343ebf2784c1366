"""Verification token database table model."""

from datetime import date

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field

from src.user_service.entities._base import EntityTable


class VerificationTokenTable(EntityTable, table=True):
    """Database persistence model for verification tokens."""

    verification_token_id: int | None = Field(default=None, primary_key=True)
    token: str | None = None
    expire_date: date | None = None
    credential_id: int | None = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("credentialtable.credential_id", ondelete="CASCADE"),
            nullable=True,
            index=True,
        ),
    )
