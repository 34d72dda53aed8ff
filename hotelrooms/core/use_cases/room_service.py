from __future__ import annotations

import asyncio
import logging
from contextlib import aclosing
from decimal import Decimal
from typing import AsyncIterator, Awaitable, Callable, TypeVar

from hotelrooms.core.entities.room import Room
from hotelrooms.core.entities.status_room import StatusRoom
from hotelrooms.core.entities.type_room import TypeRoom
from hotelrooms.core.errors import InvalidDataError, NotFoundError
from hotelrooms.core.repositories.room_repository import RoomRepository
from hotelrooms.core.use_cases.entity_service import EntityService

logger = logging.getLogger(__name__)

MIN_DAILY_RATE = Decimal("60.00")

DUPLICATE_ROOM_NUMBER = "Já existe um quarto com o número informado!"
DAILY_RATE_BELOW_MINIMUM = "O valor mínimo da diária deve ser 60 reais"
REFERENCES_NOT_FOUND = "Tipo ou Status do quarto não encontrado para os IDs fornecidos"
ROOM_NOT_FOUND_FOR_UPDATE = "Quarto não encontrado para atualização!"

A = TypeVar("A")
B = TypeVar("B")


async def _join(first: Awaitable[A], second: Awaitable[B]) -> tuple[A, B]:
    """
    Run both awaitables concurrently and return both results.

    The first failure cancels the sibling before propagating.
    """
    tasks = [asyncio.ensure_future(first), asyncio.ensure_future(second)]
    try:
        a, b = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return a, b


class RoomService(EntityService[Room]):
    """
    Room specialization of the generic service.

    Writes enforce room-number uniqueness and the daily-rate floor, then resolve the
    referenced type and status before persisting. Every room handed back to callers
    carries its resolved `type` and `status`.
    """

    def __init__(
            self,
            *,
            room_repo: RoomRepository,
            type_service: EntityService[TypeRoom],
            status_service: EntityService[StatusRoom],
    ) -> None:
        super().__init__(repository=room_repo)
        self._room_repo = room_repo
        self._type_service = type_service
        self._status_service = status_service

    # -----------------------------
    # Reads
    # -----------------------------
    async def list_all(self) -> AsyncIterator[Room]:
        async with aclosing(self._room_repo.list_ordered_by_id()) as rooms:
            async for room in rooms:
                yield await self._compose(room)

    async def get(self, entity_id: int) -> Room:
        room = await super().get(entity_id)
        return await self._compose(room)

    async def find_by_room_number(self, room_number: int) -> Room | None:
        room = await self._room_repo.find_by_room_number(room_number)
        if room is None:
            return None
        return await self._compose(room)

    # -----------------------------
    # Writes
    # -----------------------------
    async def save(self, room: Room) -> Room:
        await self._check_room_number_uniqueness(room.room_number)
        self._validate_daily_rate(room.daily_rate)

        saved = await self._resolve_references_and_persist(room, super().save)
        logger.info("Room %s created with number %s", saved.id, saved.room_number)
        return saved

    async def update(self, room: Room) -> Room:
        existing = await super().get(room.id)
        if existing.room_number != room.room_number:
            await self._check_room_number_uniqueness(room.room_number)
        self._validate_daily_rate(room.daily_rate)

        updated = await self._resolve_references_and_persist(room, self._update_existing)
        logger.info("Room %s updated", updated.id)
        return updated

    # -----------------------------
    # Internal helpers
    # -----------------------------
    async def _compose(self, room: Room) -> Room:
        type_room, status_room = await _join(
            self._type_service.get(room.type_id),
            self._status_service.get(room.status_id),
        )
        return room.attach(type_room, status_room)

    async def _check_room_number_uniqueness(self, room_number: int) -> None:
        if await self._room_repo.find_by_room_number(room_number) is not None:
            logger.info("Rejected room number %s: already in use", room_number)
            raise InvalidDataError(DUPLICATE_ROOM_NUMBER)

    @staticmethod
    def _validate_daily_rate(daily_rate: Decimal) -> None:
        if daily_rate < MIN_DAILY_RATE:
            logger.info("Rejected daily rate %s: below %s", daily_rate, MIN_DAILY_RATE)
            raise InvalidDataError(DAILY_RATE_BELOW_MINIMUM)

    async def _update_existing(self, room: Room) -> Room:
        try:
            return await super().update(room)
        except NotFoundError as e:
            raise NotFoundError(ROOM_NOT_FOUND_FOR_UPDATE) from e

    async def _resolve_references_and_persist(
            self,
            room: Room,
            persist: Callable[[Room], Awaitable[Room]],
    ) -> Room:
        try:
            type_room, status_room = await _join(
                self._type_service.get(room.type_id),
                self._status_service.get(room.status_id),
            )
        except Exception as e:
            logger.info(
                "Rejected room %s: type %s or status %s not found", room.room_number, room.type_id, room.status_id
            )
            raise NotFoundError(REFERENCES_NOT_FOUND) from e

        room.attach(type_room, status_room)
        stored = await persist(room)
        return stored.attach(type_room, status_room)
