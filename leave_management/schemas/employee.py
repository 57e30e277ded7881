from __future__ import annotations

from pydantic import BaseModel, Field

from leave_management.services.employee import EmployeeInfo


class UpsertEmployeeRequest(BaseModel):
    """Request body for upserting an employee in the stub directory."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255)
    is_active: bool = True


class EmployeeListResponse(BaseModel):
    """List of employees."""

    items: list[EmployeeInfo]
    total: int
