from __future__ import annotations

from contextlib import aclosing

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hotelrooms.core.entities.room import Room
from hotelrooms.core.entities.status_room import StatusRoom
from hotelrooms.core.entities.type_room import TypeRoom
from hotelrooms.core.use_cases.entity_service import EntityService
from hotelrooms.core.use_cases.room_service import RoomService
from hotelrooms.infrastructure.repositories.room_repository_impl import RoomRepositoryImpl
from hotelrooms.infrastructure.repositories.status_room_repository_impl import StatusRoomRepositoryImpl
from hotelrooms.infrastructure.repositories.type_room_repository_impl import TypeRoomRepositoryImpl
from hotelrooms.schemas.models import (
    RoomCreate,
    RoomResponse,
    RoomUpdate,
    StatusRoomCreate,
    StatusRoomResponse,
    StatusRoomUpdate,
    TypeRoomCreate,
    TypeRoomResponse,
    TypeRoomUpdate,
)

Sessions = async_sessionmaker[AsyncSession]


def build_type_room_service(sessions: Sessions) -> EntityService[TypeRoom]:
    return EntityService(repository=TypeRoomRepositoryImpl(sessions))


def build_status_room_service(sessions: Sessions) -> EntityService[StatusRoom]:
    return EntityService(repository=StatusRoomRepositoryImpl(sessions))


def build_room_service(sessions: Sessions) -> RoomService:
    return RoomService(
        room_repo=RoomRepositoryImpl(sessions),
        type_service=build_type_room_service(sessions),
        status_service=build_status_room_service(sessions),
    )


# -----------------------------
# Mapping
# -----------------------------
def _to_type_room(body: TypeRoomCreate | TypeRoomUpdate) -> TypeRoom:
    return TypeRoom(id=body.id, name=body.name)


def _to_type_room_response(type_room: TypeRoom) -> TypeRoomResponse:
    return TypeRoomResponse(id=type_room.id, name=type_room.name)


def _to_status_room(body: StatusRoomCreate | StatusRoomUpdate) -> StatusRoom:
    return StatusRoom(id=body.id, description=body.description)


def _to_status_room_response(status_room: StatusRoom) -> StatusRoomResponse:
    return StatusRoomResponse(id=status_room.id, description=status_room.description)


def _to_room(body: RoomCreate | RoomUpdate) -> Room:
    """
    Translate an API room body into a core Room. Resolved references and timestamps
    are never taken from input.
    """
    return Room(body.id, body.room_number, body.daily_rate, body.type_id, body.status_id)


def _to_room_response(room: Room) -> RoomResponse:
    return RoomResponse(
        id=room.id,
        room_number=room.room_number,
        daily_rate=room.daily_rate,
        type_id=room.type_id,
        status_id=room.status_id,
        type=_to_type_room_response(room.type),
        status=_to_status_room_response(room.status),
        created_at=room.created_at,
        updated_at=room.updated_at,
    )


# -----------------------------
# Rooms
# -----------------------------
async def list_rooms_service(sessions: Sessions) -> list[RoomResponse]:
    service = build_room_service(sessions)
    async with aclosing(service.list_all()) as rooms:
        return [_to_room_response(room) async for room in rooms]


async def get_room_service(room_id: int, sessions: Sessions) -> RoomResponse:
    room = await build_room_service(sessions).get(room_id)
    return _to_room_response(room)


async def create_room_service(body: RoomCreate, sessions: Sessions) -> RoomResponse:
    room = await build_room_service(sessions).save(_to_room(body))
    return _to_room_response(room)


async def update_room_service(body: RoomUpdate, sessions: Sessions) -> RoomResponse:
    room = await build_room_service(sessions).update(_to_room(body))
    return _to_room_response(room)


async def delete_room_service(room_id: int, sessions: Sessions) -> None:
    await build_room_service(sessions).delete(room_id)


# -----------------------------
# Room types
# -----------------------------
async def list_type_rooms_service(sessions: Sessions) -> list[TypeRoomResponse]:
    service = build_type_room_service(sessions)
    async with aclosing(service.list_all()) as type_rooms:
        return [_to_type_room_response(type_room) async for type_room in type_rooms]


async def get_type_room_service(type_room_id: int, sessions: Sessions) -> TypeRoomResponse:
    type_room = await build_type_room_service(sessions).get(type_room_id)
    return _to_type_room_response(type_room)


async def create_type_room_service(body: TypeRoomCreate, sessions: Sessions) -> TypeRoomResponse:
    type_room = await build_type_room_service(sessions).save(_to_type_room(body))
    return _to_type_room_response(type_room)


async def update_type_room_service(body: TypeRoomUpdate, sessions: Sessions) -> TypeRoomResponse:
    type_room = await build_type_room_service(sessions).update(_to_type_room(body))
    return _to_type_room_response(type_room)


async def delete_type_room_service(type_room_id: int, sessions: Sessions) -> None:
    await build_type_room_service(sessions).delete(type_room_id)


# -----------------------------
# Room statuses
# -----------------------------
async def list_status_rooms_service(sessions: Sessions) -> list[StatusRoomResponse]:
    service = build_status_room_service(sessions)
    async with aclosing(service.list_all()) as status_rooms:
        return [_to_status_room_response(status_room) async for status_room in status_rooms]


async def get_status_room_service(status_room_id: int, sessions: Sessions) -> StatusRoomResponse:
    status_room = await build_status_room_service(sessions).get(status_room_id)
    return _to_status_room_response(status_room)


async def create_status_room_service(body: StatusRoomCreate, sessions: Sessions) -> StatusRoomResponse:
    status_room = await build_status_room_service(sessions).save(_to_status_room(body))
    return _to_status_room_response(status_room)


async def update_status_room_service(body: StatusRoomUpdate, sessions: Sessions) -> StatusRoomResponse:
    status_room = await build_status_room_service(sessions).update(_to_status_room(body))
    return _to_status_room_response(status_room)


async def delete_status_room_service(status_room_id: int, sessions: Sessions) -> None:
    await build_status_room_service(sessions).delete(status_room_id)
