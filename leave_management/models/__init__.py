from sqlmodel import SQLModel

from leave_management.models.base import AuditMixin, IntIdBase
from leave_management.models.enums import ApprovalState, Role
from leave_management.models.leave_allocation import LeaveAllocation
from leave_management.models.leave_request import LeaveRequest
from leave_management.models.leave_type import LeaveType

__all__ = [
    "ApprovalState",
    "AuditMixin",
    "IntIdBase",
    "LeaveAllocation",
    "LeaveRequest",
    "LeaveType",
    "Role",
    "SQLModel",
]
