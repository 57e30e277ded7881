"""leave types, allocations and requests

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("date_created", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("created_by", sa.String(length=255), nullable=True),
        sa.Column("last_modified_date", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("last_modified_by", sa.String(length=255), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "leave_type",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("default_days", sa.Integer(), nullable=False),
        *_audit_columns(),
    )
    op.create_table(
        "leave_allocation",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.String(length=255), nullable=False),
        sa.Column(
            "leave_type_id", sa.Integer(), sa.ForeignKey("leave_type.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("period", sa.Integer(), nullable=False),
        sa.Column("number_of_days", sa.Integer(), nullable=False),
        *_audit_columns(),
        sa.UniqueConstraint("employee_id", "leave_type_id", "period", name="uq_allocation_employee_type_period"),
    )
    op.create_index("ix_leave_allocation_employee_id", "leave_allocation", ["employee_id"])
    op.create_index("ix_leave_allocation_leave_type_id", "leave_allocation", ["leave_type_id"])
    op.create_table(
        "leave_request",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("requesting_employee_id", sa.String(length=255), nullable=False),
        sa.Column(
            "leave_type_id", sa.Integer(), sa.ForeignKey("leave_type.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("date_requested", sa.DateTime(timezone=True), nullable=False),
        sa.Column("request_comments", sa.String(length=300), nullable=True),
        sa.Column("approved", sa.Boolean(), nullable=True),
        sa.Column("date_actioned", sa.DateTime(timezone=True), nullable=True),
        *_audit_columns(),
        sa.CheckConstraint("end_date >= start_date", name="ck_request_date_range"),
    )
    op.create_index("ix_leave_request_requesting_employee_id", "leave_request", ["requesting_employee_id"])
    op.create_index("ix_leave_request_leave_type_id", "leave_request", ["leave_type_id"])


def downgrade() -> None:
    op.drop_table("leave_request")
    op.drop_table("leave_allocation")
    op.drop_table("leave_type")
