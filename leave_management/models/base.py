from __future__ import annotations

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


def _now_utc() -> datetime:
    """Return the current UTC time."""
    return datetime.now(UTC)


class IntIdBase(SQLModel):
    """Base model with an autoincrement integer primary key."""

    id: int | None = Field(default=None, primary_key=True)


class AuditMixin(SQLModel):
    """Who created and last modified a row, and when.

    ``created_by`` and ``last_modified_by`` are stamped by the unit of work
    at save time; the timestamps are also maintained by the database.
    """

    date_created: datetime = Field(
        default_factory=_now_utc,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
        sa_column_kwargs={"server_default": sa.func.now()},
    )
    created_by: str | None = Field(default=None, max_length=255)
    last_modified_date: datetime = Field(
        default_factory=_now_utc,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
        sa_column_kwargs={"server_default": sa.func.now()},
    )
    last_modified_by: str | None = Field(default=None, max_length=255)
