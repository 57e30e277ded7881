from __future__ import annotations

import enum


class ApprovalState(enum.StrEnum):
    """Tri-state approval status of a leave request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"

    @classmethod
    def from_approved(cls, approved: bool | None) -> ApprovalState:
        """Map the nullable ``approved`` column onto a state."""
        if approved is None:
            return cls.PENDING
        return cls.APPROVED if approved else cls.DECLINED


class Role(enum.StrEnum):
    """Caller role carried by the auth context."""

    EMPLOYEE = "employee"
    ADMIN = "admin"
