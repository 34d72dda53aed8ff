from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any, AsyncIterator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.testclient import TestClient

from hotelrooms.core.entities.room import Room
from hotelrooms.core.entities.status_room import StatusRoom
from hotelrooms.core.entities.type_room import TypeRoom
from hotelrooms.core.repositories.repository import Repository
from hotelrooms.core.repositories.room_repository import RoomRepository
from hotelrooms.core.use_cases.entity_service import EntityService
from hotelrooms.core.use_cases.room_service import RoomService
from hotelrooms.infrastructure.database import build_engine, build_sessionmaker, create_schema
from hotelrooms.main import app
from hotelrooms.presentation.routers import get_sessionmaker


class InMemoryRepository(Repository[Any]):
    """
    Async in-memory stand-in for the SQLAlchemy repositories.

    Mirrors the store-owned timestamps: `created_at` on insert only, `updated_at` on every save.
    Stored and returned objects are copies, like rows loaded from a database.
    """

    def __init__(self) -> None:
        self.rows: dict[int, Any] = {}
        self.saved: list[Any] = []
        self.fail_with: Exception | None = None
        self._next_id = 1
        self._ticks = 0

    def _now(self) -> datetime:
        self._ticks += 1
        return datetime(2024, 1, 1, 12, 0, 0) + timedelta(seconds=self._ticks)

    @staticmethod
    def _copy(entity: Any) -> Any:
        if isinstance(entity, Room):
            return replace(entity, type=None, status=None)
        return replace(entity)

    async def list_all(self) -> AsyncIterator[Any]:
        for key in list(self.rows):
            await asyncio.sleep(0)
            yield self._copy(self.rows[key])

    async def get(self, entity_id: int) -> Any | None:
        await asyncio.sleep(0)
        row = self.rows.get(entity_id)
        return None if row is None else self._copy(row)

    async def save(self, entity: Any) -> Any:
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with

        stored = self._copy(entity)
        now = self._now()
        existing = self.rows.get(stored.id) if stored.id is not None else None
        if existing is None:
            if stored.id is None:
                stored.id = self._next_id
            self._next_id = max(self._next_id, stored.id) + 1
            stored.created_at = now
        else:
            stored.created_at = existing.created_at
        stored.updated_at = now

        self.rows[stored.id] = stored
        self.saved.append(self._copy(stored))
        return self._copy(stored)

    async def delete(self, entity_id: int) -> None:
        await asyncio.sleep(0)
        self.rows.pop(entity_id, None)


class InMemoryRoomRepository(InMemoryRepository, RoomRepository):
    async def list_ordered_by_id(self) -> AsyncIterator[Room]:
        for key in sorted(self.rows):
            await asyncio.sleep(0)
            yield self._copy(self.rows[key])

    async def find_by_room_number(self, room_number: int) -> Room | None:
        await asyncio.sleep(0)
        for row in self.rows.values():
            if row.room_number == room_number:
                return self._copy(row)
        return None


@pytest.fixture()
def type_repo() -> InMemoryRepository:
    repo = InMemoryRepository()
    asyncio.run(repo.save(TypeRoom(name="Single")))
    return repo


@pytest.fixture()
def status_repo() -> InMemoryRepository:
    repo = InMemoryRepository()
    asyncio.run(repo.save(StatusRoom(description="Available")))
    return repo


@pytest.fixture()
def room_repo() -> InMemoryRoomRepository:
    return InMemoryRoomRepository()


@pytest.fixture()
def empty_repo() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture()
def type_service(type_repo: InMemoryRepository) -> EntityService[TypeRoom]:
    return EntityService(repository=type_repo)


@pytest.fixture()
def status_service(status_repo: InMemoryRepository) -> EntityService[StatusRoom]:
    return EntityService(repository=status_repo)


@pytest.fixture()
def room_service(
    room_repo: InMemoryRoomRepository,
    type_service: EntityService[TypeRoom],
    status_service: EntityService[StatusRoom],
) -> RoomService:
    return RoomService(room_repo=room_repo, type_service=type_service, status_service=status_service)


@pytest.fixture()
def sessions(tmp_path) -> async_sessionmaker[AsyncSession]:
    """
    A fresh on-disk SQLite database per test, so tests never share rows.
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'hotel_rooms.db'}")
    asyncio.run(create_schema(engine))
    yield build_sessionmaker(engine)
    asyncio.run(engine.dispose())


@pytest.fixture()
def client(sessions: async_sessionmaker[AsyncSession]) -> TestClient:
    app.dependency_overrides[get_sessionmaker] = lambda: sessions
    yield TestClient(app)
    app.dependency_overrides.clear()
