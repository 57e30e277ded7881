# ruff: noqa: B008, TC001
from __future__ import annotations

from fastapi import APIRouter, Query, Response, status

from leave_management.api.deps import AdminDep, AuthDep, UnitOfWorkDep
from leave_management.schemas.common import CommandResponse
from leave_management.schemas.leave_request import (
    ChangeApprovalPayload,
    LeaveRequestListResponse,
    LeaveRequestPayload,
    LeaveRequestResponse,
)
from leave_management.services import leave_request as request_service

router = APIRouter(prefix="/leave-requests", tags=["leave-requests"])


@router.get("", response_model=LeaveRequestListResponse)
async def list_leave_requests(
    uow: UnitOfWorkDep,
    auth: AuthDep,
    mine: bool = Query(default=False),
) -> LeaveRequestListResponse:
    """List leave requests; ``mine`` restricts the list to the caller's own."""
    return await request_service.list_leave_requests(uow, auth.user_id if mine else None)


@router.get("/{request_id}", response_model=LeaveRequestResponse)
async def get_leave_request(request_id: int, uow: UnitOfWorkDep, auth: AuthDep) -> LeaveRequestResponse:
    """Get a single leave request."""
    return await request_service.get_leave_request(uow, request_id)


@router.post("", response_model=CommandResponse, status_code=status.HTTP_201_CREATED)
async def create_leave_request(
    payload: LeaveRequestPayload,
    uow: UnitOfWorkDep,
    auth: AuthDep,
    response: Response,
) -> CommandResponse:
    """Request leave for the calling employee."""
    result = await request_service.create_leave_request(uow, auth, payload)
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result


@router.put("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_leave_request(
    request_id: int,
    payload: LeaveRequestPayload,
    uow: UnitOfWorkDep,
    auth: AuthDep,
) -> None:
    """Change the dates, leave type or comments of a pending request."""
    await request_service.update_leave_request(uow, auth, request_id, details=payload)


@router.put("/{request_id}/approval", status_code=status.HTTP_204_NO_CONTENT)
async def change_approval(
    request_id: int,
    payload: ChangeApprovalPayload,
    uow: UnitOfWorkDep,
    auth: AdminDep,
) -> None:
    """Approve or decline a pending request (admin only)."""
    await request_service.update_leave_request(uow, auth, request_id, approval=payload)


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_leave_request(request_id: int, uow: UnitOfWorkDep, auth: AuthDep) -> None:
    """Delete a leave request."""
    await request_service.delete_leave_request(uow, auth, request_id)
