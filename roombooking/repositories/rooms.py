from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from roombooking.models.rooms import Room


def room_by_id(room_id: int, for_update: bool = False) -> Select:
    """
    Запрос комнаты по id. for_update блокирует строку комнаты до конца
    транзакции, так проверка доступности и запись брони идут атомарно.
    """
    stmt = select(Room).where(Room.id == room_id)
    if for_update:
        stmt = stmt.with_for_update()
    return stmt


class RoomRepository:
    """Запросы к таблице комнат"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, room_id: int, for_update: bool = False) -> Room | None:
        result = await self.db.execute(room_by_id(room_id, for_update=for_update))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Room]:
        result = await self.db.execute(select(Room).order_by(Room.id.asc()))
        return list(result.scalars().all())
