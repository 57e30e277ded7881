from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

from sqlalchemy import select
from sqlmodel import SQLModel, col

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT", bound=SQLModel)


class GenericRepository(Generic[ModelT]):
    """CRUD over one table keyed by an integer ``id``.

    Repositories only stage changes on the session. Committing is the unit
    of work's job, so several repositories can share one transaction.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, entity_id: int) -> ModelT | None:
        return await self.session.get(self.model, entity_id)

    async def get_all(self) -> Sequence[ModelT]:
        result = await self.session.execute(select(self.model).order_by(col(self.model.id)))  # type: ignore[attr-defined]
        return result.scalars().all()

    async def exists(self, entity_id: int) -> bool:
        return await self.get(entity_id) is not None

    async def add(self, entity: ModelT) -> ModelT:
        """Stage a new row and flush so its generated id is available."""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.session.delete(entity)
        await self.session.flush()
