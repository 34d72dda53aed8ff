from __future__ import annotations

from typing import AsyncIterator, Generic, TypeVar

from hotelrooms.core.entities.entity import Entity
from hotelrooms.core.errors import InvalidDataError, NotFoundError
from hotelrooms.core.repositories.repository import Repository

T = TypeVar("T", bound=Entity)


class EntityService(Generic[T]):
    """
    CRUD over any repository whose entities carry `id` and `created_at`.

    Maps an empty lookup to NotFoundError and any storage failure on write to
    InvalidDataError. `update` never creates and keeps the stored `created_at`.
    """

    def __init__(self, *, repository: Repository[T]) -> None:
        self._repository = repository

    def list_all(self) -> AsyncIterator[T]:
        return self._repository.list_all()

    async def get(self, entity_id: int) -> T:
        entity = await self._repository.get(entity_id)
        if entity is None:
            raise NotFoundError(f"Object not found with id: {entity_id}")
        return entity

    async def save(self, entity: T) -> T:
        return await self._persist(entity)

    async def delete(self, entity_id: int) -> None:
        await self._repository.delete(entity_id)

    async def update(self, entity: T) -> T:
        existing = await self._repository.get(entity.id)
        if existing is None:
            raise NotFoundError(f"Object not found with id: {entity.id}")

        entity.created_at = existing.created_at
        return await self._persist(entity)

    async def _persist(self, entity: T) -> T:
        try:
            return await self._repository.save(entity)
        except Exception as e:
            raise InvalidDataError(f"Error saving object: {e}") from e
