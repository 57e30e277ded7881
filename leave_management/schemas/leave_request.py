# ruff: noqa: TC003
from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from leave_management.models.enums import ApprovalState
from leave_management.schemas.leave_type import LeaveTypeResponse
from leave_management.services.employee import EmployeeInfo

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class LeaveRequestPayload(BaseModel):
    """Request body for creating a leave request or changing its details."""

    leave_type_id: int
    start_date: date
    end_date: date
    request_comments: str | None = Field(default=None, max_length=300)


class ChangeApprovalPayload(BaseModel):
    """Request body for approving or declining a leave request."""

    approved: bool


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class LeaveRequestResponse(BaseModel):
    """Response schema for a single leave request."""

    id: int
    requesting_employee_id: str
    employee: EmployeeInfo | None
    leave_type_id: int
    leave_type: LeaveTypeResponse
    start_date: date
    end_date: date
    days_requested: int
    date_requested: datetime
    request_comments: str | None
    approved: bool | None
    approval_state: ApprovalState
    date_actioned: datetime | None


class LeaveRequestListResponse(BaseModel):
    """List of leave requests."""

    items: list[LeaveRequestResponse]
    total: int
