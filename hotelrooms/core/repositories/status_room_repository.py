from __future__ import annotations

from hotelrooms.core.entities.status_room import StatusRoom
from hotelrooms.core.repositories.repository import Repository


class StatusRoomRepository(Repository[StatusRoom]):
    pass
