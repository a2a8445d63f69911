"""SQLAlchemy Repository — generic persistence adapter bound to one request session.

Invariants:
    - One repository instance per (session, entity type); repositories sharing a
      session share its transaction
    - create/update/remove only stage changes; save_changes() commits
    - create() flushes so the identity and insert-time defaults are populated
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from reportdesk.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyRepository(Generic[ModelT]):
    """Repository over an AsyncSession for a single ORM model."""

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self.session = session
        self.model = model

    def get_all(self) -> Select:
        """Unexecuted query over every row; callers narrow it with .where()."""
        return select(self.model)

    async def fetch_first(self, query: Select) -> ModelT | None:
        result = await self.session.execute(query.limit(1))
        return result.scalars().first()

    async def fetch_all(self, query: Select) -> Sequence[ModelT]:
        result = await self.session.execute(query)
        return result.scalars().all()

    async def create(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def remove(self, entity: ModelT) -> None:
        await self.session.delete(entity)

    async def save_changes(self) -> None:
        await self.session.commit()
