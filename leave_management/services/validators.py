"""Domain validation rules for incoming payloads.

Each validator returns the list of failed-rule messages; an empty list
means the payload is acceptable. Rules that need stored state (such as
"the leave type exists") read through the unit of work.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from leave_management.repositories.unit_of_work import UnitOfWork
    from leave_management.schemas.leave_allocation import (
        CreateLeaveAllocationPayload,
        UpdateLeaveAllocationPayload,
    )
    from leave_management.schemas.leave_request import LeaveRequestPayload
    from leave_management.schemas.leave_type import LeaveTypePayload

NAME_MAX_LENGTH = 50
MAX_DEFAULT_DAYS = 100


def validate_leave_type(payload: LeaveTypePayload) -> list[str]:
    errors: list[str] = []
    if not payload.name.strip():
        errors.append("Name is required.")
    elif len(payload.name) > NAME_MAX_LENGTH:
        errors.append(f"Name must not exceed {NAME_MAX_LENGTH} characters.")
    if payload.default_days < 0:
        errors.append("Default Days must be at least 0.")
    elif payload.default_days >= MAX_DEFAULT_DAYS:
        errors.append(f"Default Days must be less than {MAX_DEFAULT_DAYS}.")
    return errors


async def validate_create_allocation(uow: UnitOfWork, payload: CreateLeaveAllocationPayload) -> list[str]:
    """The leave type must exist and carry a quota that can be allocated."""
    leave_type = await uow.leave_types.get(payload.leave_type_id)
    if leave_type is None:
        return ["Leave Type does not exist."]
    if leave_type.default_days < 0:
        return [f"Default Days of leave type '{leave_type.name}' must be at least 0."]
    return []


async def validate_update_allocation(
    uow: UnitOfWork,
    payload: UpdateLeaveAllocationPayload,
    current_period: int,
) -> list[str]:
    errors: list[str] = []
    if not await uow.leave_types.exists(payload.leave_type_id):
        errors.append("Leave Type does not exist.")
    if payload.number_of_days < 0:
        errors.append("Number Of Days must be at least 0.")
    if payload.period < current_period:
        errors.append(f"Period must be {current_period} or later.")
    return errors


async def validate_leave_request(uow: UnitOfWork, payload: LeaveRequestPayload) -> list[str]:
    errors: list[str] = []
    if not await uow.leave_types.exists(payload.leave_type_id):
        errors.append("Leave Type does not exist.")
    # Checked here rather than on the schema so it reports as a 400 with the other rule messages.
    if payload.end_date < payload.start_date:
        errors.append("End Date must be on or after Start Date.")
    return errors
