from __future__ import annotations

from abc import abstractmethod
from typing import AsyncIterator

from hotelrooms.core.entities.room import Room
from hotelrooms.core.repositories.repository import Repository


class RoomRepository(Repository[Room]):
    @abstractmethod
    def list_ordered_by_id(self) -> AsyncIterator[Room]:
        """Yield rooms in strictly ascending id order."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_room_number(self, room_number: int) -> Room | None:
        raise NotImplementedError
