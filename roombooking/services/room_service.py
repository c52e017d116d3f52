from itertools import groupby

from sqlalchemy.ext.asyncio import AsyncSession

from roombooking.core.clock import Clock, SystemClock
from roombooking.core.entities import Room
from roombooking.core.exceptions import NotFoundError
from roombooking.repositories import BookingRepository, RoomRepository
from roombooking.repositories.mappers import room_to_entity


class RoomService:
    """Чтение комнат вместе с их активными бронями"""

    def __init__(self, db: AsyncSession, clock: Clock | None = None):
        self.clock = clock or SystemClock()
        self.bookings = BookingRepository(db)
        self.rooms = RoomRepository(db)

    async def list_rooms(self) -> list[Room]:
        rooms = await self.rooms.list_all()
        bookings = await self.bookings.active_for_rooms([room.id for room in rooms])

        by_room = {
            room_id: list(items)
            for room_id, items in groupby(
                sorted(bookings, key=lambda booking: booking.room_id),
                key=lambda booking: booking.room_id,
            )
        }
        return [room_to_entity(room, by_room.get(room.id, [])) for room in rooms]

    async def get_room(self, room_id: int) -> Room:
        """Комната с активными бронями, которые ещё не закончились"""
        room = await self.rooms.get(room_id)
        if room is None:
            raise NotFoundError("Room not found")

        bookings = await self.bookings.active_for_room(
            room_id, ending_after=self.clock.now()
        )
        return room_to_entity(room, bookings)
