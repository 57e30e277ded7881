# ruff: noqa: B008
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header

from leave_management.db import SessionDep
from leave_management.exceptions import ForbiddenError
from leave_management.models.enums import Role
from leave_management.repositories.unit_of_work import UnitOfWork
from leave_management.schemas.auth import AuthContext


async def get_auth_context(
    x_user_id: str = Header(min_length=1, max_length=255),
    x_role: Role = Header(default=Role.EMPLOYEE),
) -> AuthContext:
    """Extract dev auth context from request headers."""
    return AuthContext(user_id=x_user_id, role=x_role)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


async def require_admin(
    auth: AuthDep,
) -> AuthContext:
    """Require admin role for the request."""
    if not auth.is_admin:
        raise ForbiddenError("Admin access required")
    return auth


AdminDep = Annotated[AuthContext, Depends(require_admin)]


async def get_unit_of_work(session: SessionDep, auth: AuthDep) -> UnitOfWork:
    """One unit of work per request, acting as the calling user."""
    return UnitOfWork(session, actor_id=auth.user_id)


UnitOfWorkDep = Annotated[UnitOfWork, Depends(get_unit_of_work)]
