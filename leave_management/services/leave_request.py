"""Leave requests and the approval workflow that debits allocations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leave_management.exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError, ValidationError
from leave_management.models.enums import ApprovalState
from leave_management.models.leave_request import LeaveRequest
from leave_management.schemas.common import CommandResponse
from leave_management.schemas.leave_request import LeaveRequestListResponse, LeaveRequestResponse
from leave_management.services.allocation import current_period
from leave_management.services.employee import get_employee_directory
from leave_management.services.leave_type import build_leave_type_response
from leave_management.services.validators import validate_leave_request

if TYPE_CHECKING:
    from leave_management.models.leave_type import LeaveType
    from leave_management.repositories.unit_of_work import UnitOfWork
    from leave_management.schemas.auth import AuthContext
    from leave_management.schemas.leave_request import ChangeApprovalPayload, LeaveRequestPayload

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


async def _build_request_response(leave_request: LeaveRequest, leave_type: LeaveType) -> LeaveRequestResponse:
    """Map a request model to its response schema, with the requester's profile."""
    employee = await get_employee_directory().get_employee(leave_request.requesting_employee_id)
    return LeaveRequestResponse(
        id=leave_request.id,  # ty: ignore[invalid-argument-type]
        requesting_employee_id=leave_request.requesting_employee_id,
        employee=employee,
        leave_type_id=leave_request.leave_type_id,
        leave_type=build_leave_type_response(leave_type),
        start_date=leave_request.start_date,
        end_date=leave_request.end_date,
        days_requested=leave_request.days_requested,
        date_requested=leave_request.date_requested,
        request_comments=leave_request.request_comments,
        approved=leave_request.approved,
        approval_state=ApprovalState.from_approved(leave_request.approved),
        date_actioned=leave_request.date_actioned,
    )


def _check_owner_or_admin(auth: AuthContext, leave_request: LeaveRequest) -> None:
    if not auth.is_admin and auth.user_id != leave_request.requesting_employee_id:
        raise ForbiddenError("Only the requesting employee or an administrator may change this request")


async def _apply_details(
    uow: UnitOfWork,
    auth: AuthContext,
    leave_request: LeaveRequest,
    details: LeaveRequestPayload,
) -> None:
    """Merge new dates, leave type and comments onto a pending request."""
    _check_owner_or_admin(auth, leave_request)
    if leave_request.approved is not None:
        raise ConflictError("Only pending leave requests can be changed")

    errors = await validate_leave_request(uow, details)
    if errors:
        logger.warning("Leave request %s update rejected: %s", leave_request.id, errors)
        raise ValidationError(errors)

    leave_request.leave_type_id = details.leave_type_id
    leave_request.start_date = details.start_date
    leave_request.end_date = details.end_date
    leave_request.request_comments = details.request_comments
    await uow.leave_requests.update(leave_request)


async def _apply_approval(
    uow: UnitOfWork,
    leave_request: LeaveRequest,
    approved: bool,
    period: int,
) -> None:
    """Record the decision and, on approval, debit the matching allocation.

    The decision is write-once: a request that is already approved or
    declined is rejected so its days are never debited twice.
    """
    if leave_request.approved is not None:
        state = ApprovalState.from_approved(leave_request.approved)
        raise ConflictError(f"Leave request {leave_request.id} is already {state.value.lower()}")

    if approved:
        employee_id = leave_request.requesting_employee_id
        allocation = await uow.leave_allocations.get_user_allocations(
            employee_id, leave_request.leave_type_id, period, for_update=True
        )
        if allocation is None:
            raise NotFoundError("LeaveAllocation", f"{employee_id}/{leave_request.leave_type_id}/{period}")

        days_requested = leave_request.days_requested
        allocation.number_of_days -= days_requested
        if allocation.number_of_days < 0:
            logger.warning(
                "Allocation %s of employee %s is overdrawn: %d days",
                allocation.id,
                employee_id,
                allocation.number_of_days,
            )
        await uow.leave_allocations.update(allocation)

    await uow.leave_requests.change_approval_status(leave_request, approved)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def create_leave_request(
    uow: UnitOfWork,
    auth: AuthContext,
    payload: LeaveRequestPayload,
    period: int | None = None,
) -> CommandResponse:
    """Create a pending leave request for the calling employee.

    The employee must hold an allocation of the leave type for the period
    with enough days left to cover the request.
    """
    if period is None:
        period = current_period()

    errors = await validate_leave_request(uow, payload)
    if not errors:
        allocation = await uow.leave_allocations.get_user_allocations(auth.user_id, payload.leave_type_id, period)
        days_requested = (payload.end_date - payload.start_date).days
        if allocation is None:
            errors.append("You do not have any allocations for this leave type.")
        elif days_requested > allocation.number_of_days:
            errors.append("You do not have enough days for this request.")

    if errors:
        logger.warning("Leave request by %s rejected: %s", auth.user_id, errors)
        return CommandResponse(success=False, message="Request Failed", errors=errors)

    leave_request = await uow.leave_requests.add(
        LeaveRequest(
            requesting_employee_id=auth.user_id,
            leave_type_id=payload.leave_type_id,
            start_date=payload.start_date,
            end_date=payload.end_date,
            request_comments=payload.request_comments,
        )
    )
    await uow.save()
    logger.info("Leave request %s created by %s", leave_request.id, auth.user_id)
    return CommandResponse(success=True, message="Request Created Successfully", id=leave_request.id)


async def get_leave_request(uow: UnitOfWork, request_id: int) -> LeaveRequestResponse:
    row = await uow.leave_requests.get_leave_request_with_details(request_id)
    if row is None:
        raise NotFoundError("LeaveRequest", request_id)
    return await _build_request_response(*row)


async def list_leave_requests(uow: UnitOfWork, employee_id: str | None = None) -> LeaveRequestListResponse:
    """List leave requests, all of them or only one employee's."""
    rows = await uow.leave_requests.get_leave_requests_with_details(employee_id)
    items = [await _build_request_response(leave_request, leave_type) for leave_request, leave_type in rows]
    return LeaveRequestListResponse(items=items, total=len(items))


async def update_leave_request(
    uow: UnitOfWork,
    auth: AuthContext,
    request_id: int,
    details: LeaveRequestPayload | None = None,
    approval: ChangeApprovalPayload | None = None,
    period: int | None = None,
) -> None:
    """Change a request's details or its approval state.

    Exactly one of ``details`` and ``approval`` is given. Everything the
    call changes, including the allocation debit of an approval, is
    committed in one save.
    """
    if (details is None) == (approval is None):
        raise BadRequestError("Supply either new request details or an approval decision")

    if approval is not None:
        leave_request = await uow.leave_requests.get_for_update(request_id)
    else:
        leave_request = await uow.leave_requests.get(request_id)
    if leave_request is None:
        logger.warning("Leave request %s not found", request_id)
        raise NotFoundError("LeaveRequest", request_id)

    if details is not None:
        await _apply_details(uow, auth, leave_request, details)
    elif approval is not None:
        if period is None:
            period = current_period()
        await _apply_approval(uow, leave_request, approval.approved, period)

    await uow.save()
    if approval is not None:
        logger.info(
            "Leave request %s %s by %s",
            request_id,
            "approved" if approval.approved else "declined",
            auth.user_id,
        )
    else:
        logger.info("Leave request %s updated by %s", request_id, auth.user_id)


async def delete_leave_request(uow: UnitOfWork, auth: AuthContext, request_id: int) -> None:
    leave_request = await uow.leave_requests.get(request_id)
    if leave_request is None:
        raise NotFoundError("LeaveRequest", request_id)
    _check_owner_or_admin(auth, leave_request)
    await uow.leave_requests.delete(leave_request)
    await uow.save()
    logger.info("Leave request %s deleted by %s", request_id, auth.user_id)
