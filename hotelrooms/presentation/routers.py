from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hotelrooms.core.errors import InvalidIdError
from hotelrooms.infrastructure.database import SessionLocal
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
from hotelrooms.services.hotel_service import (
    create_room_service,
    create_status_room_service,
    create_type_room_service,
    delete_room_service,
    delete_status_room_service,
    delete_type_room_service,
    get_room_service,
    get_status_room_service,
    get_type_room_service,
    list_rooms_service,
    list_status_rooms_service,
    list_type_rooms_service,
    update_room_service,
    update_status_room_service,
    update_type_room_service,
)

router = APIRouter()

Sessions = async_sessionmaker[AsyncSession]


def get_sessionmaker() -> Sessions:
    return SessionLocal


def parse_id(raw: str) -> int:
    """Path identifiers must be non-negative integers."""
    if not raw.isascii() or not raw.isdigit():
        raise InvalidIdError(f"Invalid id: {raw}")
    return int(raw)


# -----------------------------
# Rooms
# -----------------------------
@router.get("/api/rooms", response_model=list[RoomResponse], tags=["rooms"])
async def get_rooms(sessions: Sessions = Depends(get_sessionmaker)) -> list[RoomResponse]:
    """
    List rooms in ascending id order, each with its resolved type and status
    """
    return await list_rooms_service(sessions)


@router.get("/api/rooms/{room_id}", response_model=RoomResponse, tags=["rooms"])
async def get_rooms_room_id(room_id: str, sessions: Sessions = Depends(get_sessionmaker)) -> RoomResponse:
    return await get_room_service(parse_id(room_id), sessions)


@router.post("/api/rooms", response_model=RoomResponse, status_code=201, tags=["rooms"])
async def post_rooms(body: RoomCreate, sessions: Sessions = Depends(get_sessionmaker)) -> RoomResponse:
    """
    Create a room

    Returns:
      - 201 with the stored room
      - 400 on duplicate room number, daily rate below the minimum or invalid body
      - 404 if the referenced type or status does not exist
    """
    return await create_room_service(body, sessions)


@router.put("/api/rooms", response_model=RoomResponse, tags=["rooms"])
async def put_rooms(body: RoomUpdate, sessions: Sessions = Depends(get_sessionmaker)) -> RoomResponse:
    """
    Update a room identified by `id` in the body. `createdAt` is always kept from the stored room.
    """
    return await update_room_service(body, sessions)


@router.delete("/api/rooms/{room_id}", response_model=None, tags=["rooms"])
async def delete_rooms_room_id(room_id: str, sessions: Sessions = Depends(get_sessionmaker)) -> Response:
    await delete_room_service(parse_id(room_id), sessions)
    return Response(status_code=200)


# -----------------------------
# Room types
# -----------------------------
@router.get("/api/type-rooms", response_model=list[TypeRoomResponse], tags=["type-rooms"])
async def get_type_rooms(sessions: Sessions = Depends(get_sessionmaker)) -> list[TypeRoomResponse]:
    return await list_type_rooms_service(sessions)


@router.get("/api/type-rooms/{type_room_id}", response_model=TypeRoomResponse, tags=["type-rooms"])
async def get_type_rooms_type_room_id(
    type_room_id: str,
    sessions: Sessions = Depends(get_sessionmaker),
) -> TypeRoomResponse:
    return await get_type_room_service(parse_id(type_room_id), sessions)


@router.post("/api/type-rooms", response_model=TypeRoomResponse, status_code=201, tags=["type-rooms"])
async def post_type_rooms(body: TypeRoomCreate, sessions: Sessions = Depends(get_sessionmaker)) -> TypeRoomResponse:
    return await create_type_room_service(body, sessions)


@router.put("/api/type-rooms", response_model=TypeRoomResponse, tags=["type-rooms"])
async def put_type_rooms(body: TypeRoomUpdate, sessions: Sessions = Depends(get_sessionmaker)) -> TypeRoomResponse:
    return await update_type_room_service(body, sessions)


@router.delete("/api/type-rooms/{type_room_id}", response_model=None, tags=["type-rooms"])
async def delete_type_rooms_type_room_id(
    type_room_id: str,
    sessions: Sessions = Depends(get_sessionmaker),
) -> Response:
    await delete_type_room_service(parse_id(type_room_id), sessions)
    return Response(status_code=200)


# -----------------------------
# Room statuses
# -----------------------------
@router.get("/api/status-rooms", response_model=list[StatusRoomResponse], tags=["status-rooms"])
async def get_status_rooms(sessions: Sessions = Depends(get_sessionmaker)) -> list[StatusRoomResponse]:
    return await list_status_rooms_service(sessions)


@router.get("/api/status-rooms/{status_room_id}", response_model=StatusRoomResponse, tags=["status-rooms"])
async def get_status_rooms_status_room_id(
    status_room_id: str,
    sessions: Sessions = Depends(get_sessionmaker),
) -> StatusRoomResponse:
    return await get_status_room_service(parse_id(status_room_id), sessions)


@router.post("/api/status-rooms", response_model=StatusRoomResponse, status_code=201, tags=["status-rooms"])
async def post_status_rooms(
    body: StatusRoomCreate,
    sessions: Sessions = Depends(get_sessionmaker),
) -> StatusRoomResponse:
    return await create_status_room_service(body, sessions)


@router.put("/api/status-rooms", response_model=StatusRoomResponse, tags=["status-rooms"])
async def put_status_rooms(
    body: StatusRoomUpdate,
    sessions: Sessions = Depends(get_sessionmaker),
) -> StatusRoomResponse:
    return await update_status_room_service(body, sessions)


@router.delete("/api/status-rooms/{status_room_id}", response_model=None, tags=["status-rooms"])
async def delete_status_rooms_status_room_id(
    status_room_id: str,
    sessions: Sessions = Depends(get_sessionmaker),
) -> Response:
    await delete_status_room_service(parse_id(status_room_id), sessions)
    return Response(status_code=200)
