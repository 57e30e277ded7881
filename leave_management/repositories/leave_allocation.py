from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlmodel import col

from leave_management.models.leave_allocation import LeaveAllocation
from leave_management.models.leave_type import LeaveType
from leave_management.repositories.generic import GenericRepository

if TYPE_CHECKING:
    from collections.abc import Iterable


class LeaveAllocationRepository(GenericRepository[LeaveAllocation]):
    model = LeaveAllocation

    async def allocation_exists(self, employee_id: str, leave_type_id: int, period: int) -> bool:
        """Whether the (employee, leave type, period) triple already has a row."""
        result = await self.session.execute(
            select(func.count())
            .select_from(LeaveAllocation)
            .where(
                col(LeaveAllocation.employee_id) == employee_id,
                col(LeaveAllocation.leave_type_id) == leave_type_id,
                col(LeaveAllocation.period) == period,
            )
        )
        return result.scalar_one() > 0

    async def add_allocations(self, allocations: Iterable[LeaveAllocation]) -> None:
        """Stage many allocations and write them in one flush."""
        self.session.add_all(list(allocations))
        await self.session.flush()

    async def get_user_allocations(
        self,
        employee_id: str,
        leave_type_id: int,
        period: int,
        *,
        for_update: bool = False,
    ) -> LeaveAllocation | None:
        """Return the employee's allocation of a leave type for a period, if any."""
        query = select(LeaveAllocation).where(
            col(LeaveAllocation.employee_id) == employee_id,
            col(LeaveAllocation.leave_type_id) == leave_type_id,
            col(LeaveAllocation.period) == period,
        )
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_allocations_with_details(
        self, employee_id: str | None = None
    ) -> Sequence[tuple[LeaveAllocation, LeaveType]]:
        """Allocations joined with their leave type, optionally for one employee."""
        query = select(LeaveAllocation, LeaveType).join(
            LeaveType, col(LeaveType.id) == col(LeaveAllocation.leave_type_id)
        )
        if employee_id is not None:
            query = query.where(col(LeaveAllocation.employee_id) == employee_id)
        query = query.order_by(col(LeaveAllocation.period).desc(), col(LeaveAllocation.id))
        result = await self.session.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def get_allocation_with_details(self, allocation_id: int) -> tuple[LeaveAllocation, LeaveType] | None:
        result = await self.session.execute(
            select(LeaveAllocation, LeaveType)
            .join(LeaveType, col(LeaveType.id) == col(LeaveAllocation.leave_type_id))
            .where(col(LeaveAllocation.id) == allocation_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]
