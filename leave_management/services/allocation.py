"""Leave allocations: yearly fan-out of a leave type across the workforce."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from leave_management.exceptions import ConflictError, NotFoundError, ValidationError
from leave_management.models.leave_allocation import LeaveAllocation
from leave_management.schemas.common import CommandResponse
from leave_management.schemas.leave_allocation import LeaveAllocationListResponse, LeaveAllocationResponse
from leave_management.services.employee import get_employee_directory
from leave_management.services.leave_type import build_leave_type_response, get_leave_type_or_404
from leave_management.services.validators import validate_create_allocation, validate_update_allocation

if TYPE_CHECKING:
    from leave_management.models.leave_type import LeaveType
    from leave_management.repositories.unit_of_work import UnitOfWork
    from leave_management.schemas.leave_allocation import (
        CreateLeaveAllocationPayload,
        UpdateLeaveAllocationPayload,
    )

logger = logging.getLogger(__name__)


def current_period() -> int:
    """The allocation period in effect today."""
    return date.today().year


async def _build_allocation_response(allocation: LeaveAllocation, leave_type: LeaveType) -> LeaveAllocationResponse:
    employee = await get_employee_directory().get_employee(allocation.employee_id)
    return LeaveAllocationResponse(
        id=allocation.id,  # ty: ignore[invalid-argument-type]
        employee_id=allocation.employee_id,
        employee=employee,
        leave_type_id=allocation.leave_type_id,
        leave_type=build_leave_type_response(leave_type),
        period=allocation.period,
        number_of_days=allocation.number_of_days,
    )


async def create_allocations(
    uow: UnitOfWork,
    payload: CreateLeaveAllocationPayload,
    period: int | None = None,
) -> CommandResponse:
    """Give every active employee an allocation of the leave type for a period.

    Employees who already hold an allocation for the (leave type, period)
    pair are skipped, so running this again is harmless. New rows carry the
    leave type's default days and are written in a single batch.
    """
    errors = await validate_create_allocation(uow, payload)
    if errors:
        logger.warning("Allocation for leave type %s rejected: %s", payload.leave_type_id, errors)
        return CommandResponse(success=False, message="Allocations Failed", errors=errors)

    if period is None:
        period = current_period()

    leave_type = await get_leave_type_or_404(uow, payload.leave_type_id)
    leave_type_id: int = leave_type.id  # ty: ignore[invalid-assignment]
    employees = await get_employee_directory().get_employees()

    allocations: list[LeaveAllocation] = []
    for employee in employees:
        if await uow.leave_allocations.allocation_exists(employee.id, leave_type_id, period):
            continue
        allocations.append(
            LeaveAllocation(
                employee_id=employee.id,
                leave_type_id=leave_type_id,
                number_of_days=leave_type.default_days,
                period=period,
            )
        )

    try:
        await uow.leave_allocations.add_allocations(allocations)
        await uow.save()
    except IntegrityError:
        # Another run inserted the same (employee, leave type, period) first.
        await uow.rollback()
        raise ConflictError(
            f"Allocations for leave type {leave_type_id} and period {period} were created concurrently"
        ) from None

    logger.info(
        "Allocated leave type %s for period %s: created=%d skipped=%d",
        leave_type_id,
        period,
        len(allocations),
        len(employees) - len(allocations),
    )
    return CommandResponse(success=True, message="Allocations Successful")


async def get_allocation(uow: UnitOfWork, allocation_id: int) -> LeaveAllocationResponse:
    row = await uow.leave_allocations.get_allocation_with_details(allocation_id)
    if row is None:
        raise NotFoundError("LeaveAllocation", allocation_id)
    return await _build_allocation_response(*row)


async def list_allocations(uow: UnitOfWork, employee_id: str | None = None) -> LeaveAllocationListResponse:
    """List allocations, all of them or only one employee's."""
    rows = await uow.leave_allocations.get_allocations_with_details(employee_id)
    items = [await _build_allocation_response(allocation, leave_type) for allocation, leave_type in rows]
    return LeaveAllocationListResponse(items=items, total=len(items))


async def update_allocation(
    uow: UnitOfWork,
    allocation_id: int,
    payload: UpdateLeaveAllocationPayload,
) -> LeaveAllocationResponse:
    errors = await validate_update_allocation(uow, payload, current_period())
    if errors:
        raise ValidationError(errors)

    allocation = await uow.leave_allocations.get(allocation_id)
    if allocation is None:
        raise NotFoundError("LeaveAllocation", allocation_id)

    employee_id = allocation.employee_id
    allocation.leave_type_id = payload.leave_type_id
    allocation.number_of_days = payload.number_of_days
    allocation.period = payload.period
    try:
        await uow.leave_allocations.update(allocation)
        await uow.save()
    except IntegrityError:
        await uow.rollback()
        raise ConflictError(
            f"Employee {employee_id} already has an allocation of leave type "
            f"{payload.leave_type_id} for period {payload.period}"
        ) from None

    logger.info("Updated allocation %s", allocation_id)
    return await get_allocation(uow, allocation_id)


async def delete_allocation(uow: UnitOfWork, allocation_id: int) -> None:
    allocation = await uow.leave_allocations.get(allocation_id)
    if allocation is None:
        raise NotFoundError("LeaveAllocation", allocation_id)
    await uow.leave_allocations.delete(allocation)
    await uow.save()
    logger.info("Deleted allocation %s", allocation_id)
