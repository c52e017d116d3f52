from typing import Iterable

from sqlalchemy import inspect

from roombooking.core.entities import Booking, Room, UserInfo
from roombooking.models.bookings import Booking as BookingRow
from roombooking.models.rooms import Room as RoomRow
from roombooking.models.users import User as UserRow


def _loaded(row, attribute: str) -> bool:
    return attribute not in inspect(row).unloaded


def user_to_entity(row: UserRow) -> UserInfo:
    return UserInfo(id=row.id, name=row.name, email=row.email)


def room_to_entity(row: RoomRow, bookings: Iterable[BookingRow] = ()) -> Room:
    return Room(
        id=row.id,
        name=row.name,
        capacity=row.capacity,
        bookings=tuple(booking_to_entity(booking) for booking in bookings),
    )


def booking_to_entity(row: BookingRow) -> Booking:
    """ORM строка -> сущность. Связи переносятся, только если загружены."""
    room = None
    if _loaded(row, "room") and row.room is not None:
        room = room_to_entity(row.room)

    user = None
    if _loaded(row, "user") and row.user is not None:
        user = user_to_entity(row.user)

    return Booking(
        id=row.id,
        room_id=row.room_id,
        user_id=row.user_id,
        responsible_name=row.responsible_name,
        start_time=row.start_time,
        end_time=row.end_time,
        status=row.status,
        room=room,
        user=user,
    )
