from __future__ import annotations

from pydantic import BaseModel


class CommandResponse(BaseModel):
    """Outcome of a create command: success flag, message and rule failures."""

    success: bool
    message: str
    errors: list[str] = []
    id: int | None = None
