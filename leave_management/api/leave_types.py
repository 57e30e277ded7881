# ruff: noqa: TC001
from __future__ import annotations

from fastapi import APIRouter, Response, status

from leave_management.api.deps import AdminDep, AuthDep, UnitOfWorkDep
from leave_management.schemas.common import CommandResponse
from leave_management.schemas.leave_type import LeaveTypeListResponse, LeaveTypePayload, LeaveTypeResponse
from leave_management.services import leave_type as leave_type_service

router = APIRouter(prefix="/leave-types", tags=["leave-types"])


@router.get("", response_model=LeaveTypeListResponse)
async def list_leave_types(uow: UnitOfWorkDep, auth: AuthDep) -> LeaveTypeListResponse:
    """List all leave types."""
    return await leave_type_service.list_leave_types(uow)


@router.get("/{leave_type_id}", response_model=LeaveTypeResponse)
async def get_leave_type(leave_type_id: int, uow: UnitOfWorkDep, auth: AuthDep) -> LeaveTypeResponse:
    """Get a single leave type."""
    return await leave_type_service.get_leave_type(uow, leave_type_id)


@router.post("", response_model=CommandResponse, status_code=status.HTTP_201_CREATED)
async def create_leave_type(
    payload: LeaveTypePayload,
    uow: UnitOfWorkDep,
    auth: AdminDep,
    response: Response,
) -> CommandResponse:
    """Create a leave type (admin only)."""
    result = await leave_type_service.create_leave_type(uow, payload)
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result


@router.put("/{leave_type_id}", response_model=LeaveTypeResponse)
async def update_leave_type(
    leave_type_id: int,
    payload: LeaveTypePayload,
    uow: UnitOfWorkDep,
    auth: AdminDep,
) -> LeaveTypeResponse:
    """Update a leave type's name or default days (admin only)."""
    return await leave_type_service.update_leave_type(uow, leave_type_id, payload)


@router.delete("/{leave_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_leave_type(leave_type_id: int, uow: UnitOfWorkDep, auth: AdminDep) -> None:
    """Delete a leave type with its allocations and requests (admin only)."""
    await leave_type_service.delete_leave_type(uow, leave_type_id)
