from __future__ import annotations

from hotelrooms.core.entities.type_room import TypeRoom
from hotelrooms.core.repositories.repository import Repository


class TypeRoomRepository(Repository[TypeRoom]):
    pass
