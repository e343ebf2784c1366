from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base class for domain aggregates.

    Identity fields are declared by each aggregate and stay ``None`` until the
    storage layer assigns them. Relationship fields may point back at their
    owner, so instances are never revalidated on assignment.
    """

    model_config = ConfigDict(
        validate_assignment=False,
        revalidate_instances="never",
    )


class EntityTable(SQLModel, table=False):
    """Base persistence model carrying row timestamps."""

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )


def copy_into_row(row: SQLModel, source: BaseModel, fields: tuple[str, ...]) -> SQLModel:
    """Copy the non-identity ``fields`` of ``source`` onto ``row``."""
    for name in fields[1:]:
        setattr(row, name, getattr(source, name))
    return row
