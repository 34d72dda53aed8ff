from __future__ import annotations

from contextlib import aclosing
from typing import AsyncIterator

from sqlalchemy import select

from hotelrooms.core.entities.room import Room
from hotelrooms.core.repositories.room_repository import RoomRepository
from hotelrooms.infrastructure.models.models import RoomModel
from hotelrooms.infrastructure.repositories.sql_repository import SqlAlchemyRepository


class RoomRepositoryImpl(SqlAlchemyRepository[Room], RoomRepository):
    """SQLAlchemy implementation for Room persistence. Resolved references are never stored."""

    model = RoomModel
    id_column = "room_id"

    def _to_entity(self, row: RoomModel) -> Room:
        return Room(
            id=row.room_id,
            room_number=row.room_number,
            daily_rate=row.daily_rate,
            type_id=row.type_room_id,
            status_id=row.status_room_id,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _apply(self, row: RoomModel, entity: Room) -> None:
        row.room_number = entity.room_number
        row.daily_rate = entity.daily_rate
        row.type_room_id = entity.type_id
        row.status_room_id = entity.status_id

    async def list_ordered_by_id(self) -> AsyncIterator[Room]:
        statement = select(RoomModel).order_by(RoomModel.room_id.asc())
        async with aclosing(self._stream(statement)) as rooms:
            async for room in rooms:
                yield room

    async def find_by_room_number(self, room_number: int) -> Room | None:
        async with self._sessions() as session:
            row = (
                await session.scalars(select(RoomModel).where(RoomModel.room_number == room_number))
            ).first()
            if row is None:
                return None
            return self._to_entity(row)
