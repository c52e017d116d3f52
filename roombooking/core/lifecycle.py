"""
Жизненный цикл брони.

Хранимый статус меняется только явными действиями (создание, отмена).
Эффективный статус вычисляется из хранимого и текущего времени и в базу
не записывается. Проверки изменений опираются на хранимый статус.
"""

from dataclasses import dataclass
from datetime import datetime

from .clock import to_utc
from .entities import Booking, BookingStatus
from .exceptions import (
    BookingCancelledError,
    BookingCompletedError,
    BookingInProgressError,
    ValidationError,
)

START_IN_PAST_MESSAGE = "The start time must be after the current time."
END_BEFORE_START_MESSAGE = "The end time must be after the start time."


@dataclass(frozen=True)
class BookingPatch:
    """Изменения брони. None означает, что поле не передано."""

    responsible_name: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    status: BookingStatus | None = None

    @property
    def cancels(self) -> bool:
        return self.status == BookingStatus.CANCELLED

    @property
    def changes_time(self) -> bool:
        return self.start_time is not None or self.end_time is not None

    def apply(self, booking: Booking) -> Booking:
        changes = {
            name: value
            for name, value in (
                ("responsible_name", self.responsible_name),
                ("start_time", self.start_time),
                ("end_time", self.end_time),
                ("status", self.status),
            )
            if value is not None
        }
        return booking.with_changes(**changes)


def effective_status(
    stored: BookingStatus, start_time: datetime, end_time: datetime, now: datetime
) -> BookingStatus:
    if stored in (BookingStatus.CANCELLED, BookingStatus.COMPLETED):
        return stored
    now = to_utc(now)
    if now < to_utc(start_time):
        return BookingStatus.SCHEDULED
    if now < to_utc(end_time):
        return BookingStatus.IN_PROGRESS
    return BookingStatus.COMPLETED


def booking_effective_status(booking: Booking, now: datetime) -> BookingStatus:
    return effective_status(booking.status, booking.start_time, booking.end_time, now)


def validate_times(start_time: datetime, end_time: datetime, now: datetime) -> None:
    """Начало строго после now, конец строго после начала"""
    if to_utc(start_time) <= to_utc(now):
        raise ValidationError("start_time", START_IN_PAST_MESSAGE)
    if to_utc(end_time) <= to_utc(start_time):
        raise ValidationError("end_time", END_BEFORE_START_MESSAGE)


def check_mutation(booking: Booking, patch: BookingPatch, now: datetime) -> bool:
    """
    Разрешено ли применить patch к брони.

    Порядок проверок важен: completed, затем in_progress (отмена разрешена),
    затем cancelled. Возвращает True, если после применения нужно проверить
    доступность комнаты.
    """
    if booking.status == BookingStatus.COMPLETED:
        raise BookingCompletedError()

    if not patch.cancels and booking.status == BookingStatus.IN_PROGRESS:
        raise BookingInProgressError()

    if booking.status == BookingStatus.CANCELLED:
        raise BookingCancelledError()

    if patch.status is not None and not patch.cancels:
        raise ValidationError("status", "The selected status is invalid.")

    if patch.start_time is not None and to_utc(patch.start_time) <= to_utc(now):
        raise ValidationError("start_time", START_IN_PAST_MESSAGE)

    if patch.changes_time:
        start_time = patch.start_time or booking.start_time
        end_time = patch.end_time or booking.end_time
        if to_utc(end_time) <= to_utc(start_time):
            field = "end_time" if patch.end_time is not None else "start_time"
            raise ValidationError(field, END_BEFORE_START_MESSAGE)

    return patch.changes_time and not patch.cancels
