from datetime import datetime

from pydantic import Field

from roombooking.core.entities import Room
from roombooking.schemas.booking import (
    BookingPublicResponse,
    BookingResponse,
    booking_view,
)
from roombooking.schemas.common import RoomShort


class RoomResponse(RoomShort):
    """Схема ответа с комнатой и её активными бронями"""

    bookings: list[BookingResponse | BookingPublicResponse] = Field(
        default_factory=list,
        description="Активные брони. Чужие брони показываются без деталей",
    )

    @classmethod
    def build(cls, room: Room, viewer_id: int, now: datetime) -> "RoomResponse":
        return cls(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            bookings=[booking_view(booking, viewer_id, now) for booking in room.bookings],
        )
