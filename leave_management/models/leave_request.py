from __future__ import annotations

from datetime import UTC, date, datetime

import sqlalchemy as sa
from sqlmodel import Field

from leave_management.models.base import AuditMixin, IntIdBase


def _now_utc() -> datetime:
    return datetime.now(UTC)


class LeaveRequest(IntIdBase, AuditMixin, table=True):
    """An employee's request for leave and its approval state.

    ``approved`` is None while pending, True once approved and False once
    declined. The decision is written once.
    """

    __tablename__ = "leave_request"
    __table_args__ = (sa.CheckConstraint("end_date >= start_date", name="ck_request_date_range"),)

    requesting_employee_id: str = Field(max_length=255, index=True)
    leave_type_id: int = Field(
        sa_column=sa.Column(
            sa.Integer, sa.ForeignKey("leave_type.id", ondelete="CASCADE"), nullable=False, index=True
        ),
    )
    start_date: date
    end_date: date
    date_requested: datetime = Field(
        default_factory=_now_utc,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
    )
    request_comments: str | None = Field(default=None, max_length=300)
    approved: bool | None = None
    date_actioned: datetime | None = Field(default=None, sa_type=sa.DateTime(timezone=True))  # ty: ignore[invalid-argument-type]

    @property
    def days_requested(self) -> int:
        """Whole days between start and end date."""
        return (self.end_date - self.start_date).days
