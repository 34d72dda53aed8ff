from __future__ import annotations

from hotelrooms.core.entities.status_room import StatusRoom
from hotelrooms.core.repositories.status_room_repository import StatusRoomRepository
from hotelrooms.infrastructure.models.models import StatusRoomModel
from hotelrooms.infrastructure.repositories.sql_repository import SqlAlchemyRepository


class StatusRoomRepositoryImpl(SqlAlchemyRepository[StatusRoom], StatusRoomRepository):
    model = StatusRoomModel
    id_column = "status_rom_id"

    def _to_entity(self, row: StatusRoomModel) -> StatusRoom:
        return StatusRoom(
            id=row.status_rom_id,
            description=row.description,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _apply(self, row: StatusRoomModel, entity: StatusRoom) -> None:
        row.description = entity.description
