from __future__ import annotations

from leave_management.models.leave_type import LeaveType
from leave_management.repositories.generic import GenericRepository


class LeaveTypeRepository(GenericRepository[LeaveType]):
    model = LeaveType
