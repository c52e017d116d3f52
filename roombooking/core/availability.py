from typing import Iterable

from .entities import Booking
from .interval import Interval, overlaps


def active_bookings(
    bookings: Iterable[Booking], exclude_booking_id: int | None = None
) -> list[Booking]:
    """Брони, которые блокируют комнату: scheduled и in_progress"""
    return [
        booking
        for booking in bookings
        if booking.is_active
        and (exclude_booking_id is None or booking.id != exclude_booking_id)
    ]


def find_conflicts(
    bookings: Iterable[Booking],
    candidate: Interval,
    exclude_booking_id: int | None = None,
) -> list[Booking]:
    return [
        booking
        for booking in active_bookings(bookings, exclude_booking_id)
        if overlaps(candidate, booking.interval)
    ]


def is_available(
    bookings: Iterable[Booking],
    candidate: Interval,
    exclude_booking_id: int | None = None,
) -> bool:
    """
    Свободна ли комната на промежуток candidate.

    bookings - снимок броней одной комнаты. Отменённые и завершённые брони
    не мешают, бронь exclude_booking_id не учитывается независимо от статуса
    (так проверяется перенос существующей брони).
    """
    return not find_conflicts(bookings, candidate, exclude_booking_id)
