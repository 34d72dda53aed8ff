from __future__ import annotations

from abc import abstractmethod
from contextlib import aclosing
from typing import Any, AsyncIterator, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hotelrooms.core.repositories.repository import Repository
from hotelrooms.infrastructure.models.models import utcnow

T = TypeVar("T")


class SqlAlchemyRepository(Repository[T]):
    """
    Base SQLAlchemy implementation shared by the entity repositories.

    Every call checks out its own AsyncSession, so independent lookups can run
    concurrently. Timestamps are owned here: `created_at` is written once on insert,
    `updated_at` on every save.
    """

    model: type[Any]
    id_column: str

    def __init__(self, sessions: async_sessionmaker[AsyncSession]) -> None:
        self._sessions = sessions

    @abstractmethod
    def _to_entity(self, row: Any) -> T:
        pass

    @abstractmethod
    def _apply(self, row: Any, entity: T) -> None:
        """Copy the domain columns of `entity` onto `row`."""
        pass

    async def list_all(self) -> AsyncIterator[T]:
        async with aclosing(self._stream(select(self.model))) as entities:
            async for entity in entities:
                yield entity

    async def get(self, entity_id: int) -> T | None:
        async with self._sessions() as session:
            row = await session.get(self.model, entity_id)
            if row is None:
                return None
            return self._to_entity(row)

    async def save(self, entity: T) -> T:
        async with self._sessions() as session:
            entity_id = entity.id
            row = await session.get(self.model, entity_id) if entity_id is not None else None

            now = utcnow()
            if row is None:
                row = self.model()
                if entity_id is not None:
                    setattr(row, self.id_column, entity_id)
                row.created_at = now

            self._apply(row, entity)
            row.updated_at = now

            session.add(row)
            await session.commit()
            await session.refresh(row)
            return self._to_entity(row)

    async def delete(self, entity_id: int) -> None:
        async with self._sessions() as session:
            row = await session.get(self.model, entity_id)
            if row is None:
                return
            await session.delete(row)
            await session.commit()

    async def _stream(self, statement) -> AsyncIterator[T]:
        async with self._sessions() as session:
            rows = await session.stream_scalars(statement)
            async for row in rows:
                yield self._to_entity(row)
