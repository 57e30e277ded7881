"""Unit of work: the repositories of one request sharing one transaction."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import event
from sqlalchemy.orm import Session

from leave_management.models.base import AuditMixin
from leave_management.repositories.leave_allocation import LeaveAllocationRepository
from leave_management.repositories.leave_request import LeaveRequestRepository
from leave_management.repositories.leave_type import LeaveTypeRepository

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

ACTOR_KEY = "actor_id"


@event.listens_for(Session, "before_flush")
def _stamp_audit_columns(session: Session, flush_context: Any, instances: Any) -> None:
    """Fill the audit columns of new and modified rows with the acting user."""
    actor = session.info.get(ACTOR_KEY)
    now = datetime.now(UTC)
    for obj in session.new:
        if isinstance(obj, AuditMixin):
            obj.created_by = actor
            obj.last_modified_by = actor
    for obj in session.dirty:
        if isinstance(obj, AuditMixin) and session.is_modified(obj):
            obj.last_modified_date = now
            obj.last_modified_by = actor


class UnitOfWork:
    """Groups the leave repositories around one session.

    Nothing is committed until :meth:`save` is called, so all reads and
    writes of one operation become visible together or not at all.
    """

    def __init__(self, session: AsyncSession, actor_id: str | None = None) -> None:
        self.session = session
        session.info[ACTOR_KEY] = actor_id
        self.leave_types = LeaveTypeRepository(session)
        self.leave_allocations = LeaveAllocationRepository(session)
        self.leave_requests = LeaveRequestRepository(session)

    @property
    def actor_id(self) -> str | None:
        return self.session.info.get(ACTOR_KEY)

    async def save(self) -> None:
        """Commit everything staged in this unit of work."""
        await self.session.commit()
        logger.debug("Unit of work committed by %s", self.actor_id)

    async def rollback(self) -> None:
        await self.session.rollback()
