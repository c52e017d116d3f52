from datetime import datetime

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from roombooking.core.entities import ACTIVE_STATUSES
from roombooking.models.bookings import Booking


def booking_by_id(booking_id: int, for_update: bool = False) -> Select:
    stmt = select(Booking).where(Booking.id == booking_id)
    if for_update:
        stmt = stmt.with_for_update(of=Booking)
    return stmt


class BookingRepository:
    """Запросы к таблице броней"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(
        self, booking_id: int, with_relations: bool = False, for_update: bool = False
    ) -> Booking | None:
        stmt = booking_by_id(booking_id, for_update=for_update)
        if with_relations:
            stmt = stmt.options(selectinload(Booking.room), selectinload(Booking.user))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def for_user(self, user_id: int) -> list[Booking]:
        result = await self.db.execute(
            select(Booking)
            .where(Booking.user_id == user_id)
            .options(selectinload(Booking.room))
            .order_by(Booking.start_time.asc(), Booking.id.asc())
        )
        return list(result.scalars().all())

    async def active_for_rooms(
        self, room_ids: list[int], ending_after: datetime | None = None
    ) -> list[Booking]:
        """Активные брони комнат, отсортированные по началу"""
        if not room_ids:
            return []

        stmt = select(Booking).where(
            Booking.room_id.in_(room_ids),
            Booking.status.in_(list(ACTIVE_STATUSES)),
        )
        if ending_after is not None:
            stmt = stmt.where(Booking.end_time >= ending_after)

        result = await self.db.execute(
            stmt.order_by(Booking.start_time.asc(), Booking.id.asc())
        )
        return list(result.scalars().all())

    async def active_for_room(
        self, room_id: int, ending_after: datetime | None = None
    ) -> list[Booking]:
        return await self.active_for_rooms([room_id], ending_after=ending_after)

    async def add(self, booking: Booking) -> Booking:
        self.db.add(booking)
        await self.db.flush()
        return booking
