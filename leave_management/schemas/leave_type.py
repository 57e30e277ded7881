# ruff: noqa: TC003
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class LeaveTypePayload(BaseModel):
    """Request body for creating or updating a leave type.

    Range rules are checked by the leave type validator so that failures
    come back as field messages rather than a schema error.
    """

    name: str
    default_days: int


class LeaveTypeResponse(BaseModel):
    """Response schema for a leave type."""

    id: int
    name: str
    default_days: int
    date_created: datetime


class LeaveTypeListResponse(BaseModel):
    """List of leave types."""

    items: list[LeaveTypeResponse]
    total: int
