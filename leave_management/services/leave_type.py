from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leave_management.exceptions import NotFoundError, ValidationError
from leave_management.models.leave_type import LeaveType
from leave_management.schemas.common import CommandResponse
from leave_management.schemas.leave_type import LeaveTypeListResponse, LeaveTypeResponse
from leave_management.services.validators import validate_leave_type

if TYPE_CHECKING:
    from leave_management.repositories.unit_of_work import UnitOfWork
    from leave_management.schemas.leave_type import LeaveTypePayload

logger = logging.getLogger(__name__)


def build_leave_type_response(leave_type: LeaveType) -> LeaveTypeResponse:
    """Map a leave type model to its response schema."""
    return LeaveTypeResponse(
        id=leave_type.id,  # ty: ignore[invalid-argument-type]
        name=leave_type.name,
        default_days=leave_type.default_days,
        date_created=leave_type.date_created,
    )


async def get_leave_type_or_404(uow: UnitOfWork, leave_type_id: int) -> LeaveType:
    leave_type = await uow.leave_types.get(leave_type_id)
    if leave_type is None:
        raise NotFoundError("LeaveType", leave_type_id)
    return leave_type


async def create_leave_type(uow: UnitOfWork, payload: LeaveTypePayload) -> CommandResponse:
    errors = validate_leave_type(payload)
    if errors:
        logger.warning("Leave type creation rejected: %s", errors)
        return CommandResponse(success=False, message="Creation Failed", errors=errors)

    leave_type = await uow.leave_types.add(LeaveType(name=payload.name, default_days=payload.default_days))
    await uow.save()
    logger.info("Created leave type %s (%s)", leave_type.id, leave_type.name)
    return CommandResponse(success=True, message="Creation Successful", id=leave_type.id)


async def get_leave_type(uow: UnitOfWork, leave_type_id: int) -> LeaveTypeResponse:
    return build_leave_type_response(await get_leave_type_or_404(uow, leave_type_id))


async def list_leave_types(uow: UnitOfWork) -> LeaveTypeListResponse:
    leave_types = await uow.leave_types.get_all()
    items = [build_leave_type_response(lt) for lt in leave_types]
    return LeaveTypeListResponse(items=items, total=len(items))


async def update_leave_type(uow: UnitOfWork, leave_type_id: int, payload: LeaveTypePayload) -> LeaveTypeResponse:
    errors = validate_leave_type(payload)
    if errors:
        raise ValidationError(errors)

    leave_type = await get_leave_type_or_404(uow, leave_type_id)
    leave_type.name = payload.name
    leave_type.default_days = payload.default_days
    await uow.leave_types.update(leave_type)
    await uow.save()
    logger.info("Updated leave type %s", leave_type_id)
    return build_leave_type_response(leave_type)


async def delete_leave_type(uow: UnitOfWork, leave_type_id: int) -> None:
    """Delete a leave type. Its allocations and requests go with it."""
    leave_type = await get_leave_type_or_404(uow, leave_type_id)
    await uow.leave_types.delete(leave_type)
    await uow.save()
    logger.info("Deleted leave type %s", leave_type_id)
