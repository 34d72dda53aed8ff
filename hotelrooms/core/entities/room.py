from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from hotelrooms.core.entities.status_room import StatusRoom
from hotelrooms.core.entities.type_room import TypeRoom


@dataclass(slots=True)
class Room:
    """
    A rentable unit. `type` and `status` are resolved on reads and never persisted.

    Built either positionally, Room(id, room_number, daily_rate, type_id, status_id),
    or empty and filled attribute by attribute.
    """
    id: int | None = None
    room_number: int | None = None
    daily_rate: Decimal | None = None
    type_id: int | None = None
    status_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    type: TypeRoom | None = field(default=None, compare=False)
    status: StatusRoom | None = field(default=None, compare=False)

    def attach(self, type_room: TypeRoom, status_room: StatusRoom) -> Room:
        self.type = type_room
        self.status = status_room
        return self
