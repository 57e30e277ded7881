from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field

from leave_management.models.base import AuditMixin, IntIdBase


class LeaveAllocation(IntIdBase, AuditMixin, table=True):
    """Days of one leave type an employee holds for one period (year)."""

    __tablename__ = "leave_allocation"
    __table_args__ = (
        sa.UniqueConstraint("employee_id", "leave_type_id", "period", name="uq_allocation_employee_type_period"),
    )

    employee_id: str = Field(max_length=255, index=True)
    leave_type_id: int = Field(
        sa_column=sa.Column(
            sa.Integer, sa.ForeignKey("leave_type.id", ondelete="CASCADE"), nullable=False, index=True
        ),
    )
    period: int
    number_of_days: int
