from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator, Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Repository interface shared by every persisted entity.
    """

    @abstractmethod
    def list_all(self) -> AsyncIterator[T]:
        """Lazily yield every stored entity."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, entity_id: int) -> T | None:
        """Return a single entity by id, or None if missing."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert or update an entity and return it as stored (id and timestamps assigned)."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        raise NotImplementedError
