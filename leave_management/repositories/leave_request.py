from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy import select
from sqlmodel import col

from leave_management.models.leave_request import LeaveRequest
from leave_management.models.leave_type import LeaveType
from leave_management.repositories.generic import GenericRepository


class LeaveRequestRepository(GenericRepository[LeaveRequest]):
    model = LeaveRequest

    async def get_for_update(self, request_id: int) -> LeaveRequest | None:
        """Fetch a request and lock its row until the transaction ends."""
        result = await self.session.execute(
            select(LeaveRequest).where(col(LeaveRequest.id) == request_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def change_approval_status(self, leave_request: LeaveRequest, approved: bool) -> None:
        """Record the approval decision on the request."""
        leave_request.approved = approved
        leave_request.date_actioned = datetime.now(UTC)
        self.session.add(leave_request)
        await self.session.flush()

    async def get_leave_requests_with_details(
        self, employee_id: str | None = None
    ) -> Sequence[tuple[LeaveRequest, LeaveType]]:
        """Requests joined with their leave type, newest first."""
        query = select(LeaveRequest, LeaveType).join(LeaveType, col(LeaveType.id) == col(LeaveRequest.leave_type_id))
        if employee_id is not None:
            query = query.where(col(LeaveRequest.requesting_employee_id) == employee_id)
        query = query.order_by(col(LeaveRequest.date_requested).desc(), col(LeaveRequest.id).desc())
        result = await self.session.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def get_leave_request_with_details(self, request_id: int) -> tuple[LeaveRequest, LeaveType] | None:
        result = await self.session.execute(
            select(LeaveRequest, LeaveType)
            .join(LeaveType, col(LeaveType.id) == col(LeaveRequest.leave_type_id))
            .where(col(LeaveRequest.id) == request_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]
