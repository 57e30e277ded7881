from __future__ import annotations

from pydantic import BaseModel

from leave_management.schemas.leave_type import LeaveTypeResponse
from leave_management.services.employee import EmployeeInfo


class CreateLeaveAllocationPayload(BaseModel):
    """Request body for allocating a leave type to every active employee."""

    leave_type_id: int


class UpdateLeaveAllocationPayload(BaseModel):
    """Request body for correcting a single allocation."""

    leave_type_id: int
    number_of_days: int
    period: int


class LeaveAllocationResponse(BaseModel):
    """Response schema for an allocation with its leave type and employee."""

    id: int
    employee_id: str
    employee: EmployeeInfo | None
    leave_type_id: int
    leave_type: LeaveTypeResponse
    period: int
    number_of_days: int


class LeaveAllocationListResponse(BaseModel):
    """List of allocations."""

    items: list[LeaveAllocationResponse]
    total: int
