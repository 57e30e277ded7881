# ruff: noqa: B008, TC001
from __future__ import annotations

from fastapi import APIRouter, Query, Response, status

from leave_management.api.deps import AdminDep, AuthDep, UnitOfWorkDep
from leave_management.schemas.common import CommandResponse
from leave_management.schemas.leave_allocation import (
    CreateLeaveAllocationPayload,
    LeaveAllocationListResponse,
    LeaveAllocationResponse,
    UpdateLeaveAllocationPayload,
)
from leave_management.services import allocation as allocation_service

router = APIRouter(prefix="/leave-allocations", tags=["leave-allocations"])


@router.get("", response_model=LeaveAllocationListResponse)
async def list_allocations(
    uow: UnitOfWorkDep,
    auth: AuthDep,
    mine: bool = Query(default=False),
) -> LeaveAllocationListResponse:
    """List allocations; ``mine`` restricts the list to the caller's own."""
    return await allocation_service.list_allocations(uow, auth.user_id if mine else None)


@router.get("/{allocation_id}", response_model=LeaveAllocationResponse)
async def get_allocation(allocation_id: int, uow: UnitOfWorkDep, auth: AuthDep) -> LeaveAllocationResponse:
    """Get a single allocation."""
    return await allocation_service.get_allocation(uow, allocation_id)


@router.post("", response_model=CommandResponse, status_code=status.HTTP_201_CREATED)
async def create_allocations(
    payload: CreateLeaveAllocationPayload,
    uow: UnitOfWorkDep,
    auth: AdminDep,
    response: Response,
) -> CommandResponse:
    """Allocate a leave type to every active employee for the current year (admin only)."""
    result = await allocation_service.create_allocations(uow, payload)
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result


@router.put("/{allocation_id}", response_model=LeaveAllocationResponse)
async def update_allocation(
    allocation_id: int,
    payload: UpdateLeaveAllocationPayload,
    uow: UnitOfWorkDep,
    auth: AdminDep,
) -> LeaveAllocationResponse:
    """Correct a single allocation (admin only)."""
    return await allocation_service.update_allocation(uow, allocation_id, payload)


@router.delete("/{allocation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_allocation(allocation_id: int, uow: UnitOfWorkDep, auth: AdminDep) -> None:
    """Delete a single allocation (admin only)."""
    await allocation_service.delete_allocation(uow, allocation_id)
