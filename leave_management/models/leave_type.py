from __future__ import annotations

from sqlmodel import Field

from leave_management.models.base import AuditMixin, IntIdBase


class LeaveType(IntIdBase, AuditMixin, table=True):
    """A named category of leave with its default annual quota."""

    __tablename__ = "leave_type"

    name: str = Field(max_length=50)
    default_days: int
