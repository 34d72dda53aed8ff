from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Dict

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, StringConstraints
from pydantic.alias_generators import to_camel

NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Identifier = Annotated[int, Field(ge=0)]
NonNegativeInt = Annotated[int, Field(ge=0)]
Money = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2),
    # at most 10 significant digits, so the shortest float repr prints the same decimal
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TypeRoomCreate(ApiModel):
    id: None = None
    name: NonBlank


class TypeRoomUpdate(ApiModel):
    id: Identifier
    name: NonBlank


class TypeRoomResponse(ApiModel):
    id: int
    name: str


class StatusRoomCreate(ApiModel):
    id: None = None
    description: NonBlank


class StatusRoomUpdate(ApiModel):
    id: Identifier
    description: NonBlank


class StatusRoomResponse(ApiModel):
    id: int
    description: str


class RoomCreate(ApiModel):
    id: None = None
    room_number: NonNegativeInt
    daily_rate: Money
    type_id: Identifier
    status_id: Identifier


class RoomUpdate(ApiModel):
    id: Identifier
    room_number: NonNegativeInt
    daily_rate: Money
    type_id: Identifier
    status_id: Identifier


class RoomResponse(ApiModel):
    id: int
    room_number: int
    daily_rate: Money
    type_id: int
    status_id: int
    type: TypeRoomResponse
    status: StatusRoomResponse
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ErrorResponse(BaseModel):
    status: int
    error: str
    message: str
    path: str
    errors: Dict[str, str] | None = None
