from __future__ import annotations

from hotelrooms.core.entities.type_room import TypeRoom
from hotelrooms.core.repositories.type_room_repository import TypeRoomRepository
from hotelrooms.infrastructure.models.models import TypeRoomModel
from hotelrooms.infrastructure.repositories.sql_repository import SqlAlchemyRepository


class TypeRoomRepositoryImpl(SqlAlchemyRepository[TypeRoom], TypeRoomRepository):
    model = TypeRoomModel
    id_column = "type_rom_id"

    def _to_entity(self, row: TypeRoomModel) -> TypeRoom:
        return TypeRoom(
            id=row.type_rom_id,
            name=row.name,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _apply(self, row: TypeRoomModel, entity: TypeRoom) -> None:
        row.name = entity.name
