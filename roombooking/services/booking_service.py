"""
Сервис бронирований.

Единственное место с побочными эффектами: создаёт и изменяет брони.
Проверка доступности и запись выполняются в одной транзакции под
блокировкой строки комнаты, при любой ошибке транзакция откатывается.
"""

import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from roombooking.core.availability import find_conflicts
from roombooking.core.clock import Clock, SystemClock, to_utc
from roombooking.core.entities import Booking, BookingStatus
from roombooking.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from roombooking.core.interval import Interval
from roombooking.core.lifecycle import BookingPatch, check_mutation, validate_times
from roombooking.models.bookings import Booking as BookingRow
from roombooking.repositories import BookingRepository, RoomRepository
from roombooking.repositories.mappers import booking_to_entity, room_to_entity

logger = logging.getLogger(__name__)

RESPONSIBLE_NAME_MAX_LENGTH = 255


def _validate_responsible_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise ValidationError(
            "responsible_name", "The responsible name field is required."
        )
    if len(name) > RESPONSIBLE_NAME_MAX_LENGTH:
        raise ValidationError(
            "responsible_name",
            f"The responsible name may not be greater than {RESPONSIBLE_NAME_MAX_LENGTH} characters.",
        )
    return name


class BookingService:
    def __init__(self, db: AsyncSession, clock: Clock | None = None):
        self.db = db
        self.clock = clock or SystemClock()
        self.bookings = BookingRepository(db)
        self.rooms = RoomRepository(db)

    async def create(
        self,
        room_id: int,
        user_id: int,
        responsible_name: str,
        start_time: datetime,
        end_time: datetime,
    ) -> Booking:
        """Создание брони со статусом scheduled"""
        responsible_name = _validate_responsible_name(responsible_name)
        validate_times(start_time, end_time, self.clock.now())
        candidate = Interval(start_time, end_time)

        try:
            room = await self.rooms.get(room_id, for_update=True)
            if room is None:
                raise NotFoundError("Room not found")

            await self._ensure_available(room_id, candidate)

            row = BookingRow(
                room_id=room_id,
                user_id=user_id,
                responsible_name=responsible_name,
                start_time=candidate.start,
                end_time=candidate.end,
                status=BookingStatus.SCHEDULED,
            )
            await self.bookings.add(row)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            f"[BOOKING] Создана бронь {row.id}: комната {room_id}, "
            f"{candidate.start.isoformat()} - {candidate.end.isoformat()}"
        )
        return booking_to_entity(row).with_changes(room=room_to_entity(room))

    async def update(
        self, booking_id: int, requester_id: int, patch: BookingPatch
    ) -> Booking:
        """
        Изменение брони владельцем.

        Сначала проверяется владелец, затем статус брони, затем
        доступность комнаты, если меняется время.
        """
        try:
            row = await self.bookings.get(
                booking_id, with_relations=True, for_update=True
            )
            if row is None:
                raise NotFoundError("Booking not found")

            booking = booking_to_entity(row)
            if not booking.is_owned_by(requester_id):
                raise ForbiddenError()

            needs_availability = check_mutation(booking, patch, self.clock.now())
            if patch.responsible_name is not None:
                _validate_responsible_name(patch.responsible_name)
            updated = patch.apply(booking)

            if needs_availability:
                await self.rooms.get(booking.room_id, for_update=True)
                await self._ensure_available(
                    booking.room_id, updated.interval, exclude_booking_id=booking.id
                )

            row.responsible_name = updated.responsible_name
            row.start_time = to_utc(updated.start_time)
            row.end_time = to_utc(updated.end_time)
            row.status = updated.status
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        if patch.cancels:
            logger.info(f"[BOOKING] Бронь {booking_id} отменена")
        else:
            logger.info(f"[BOOKING] Бронь {booking_id} изменена")
        return booking_to_entity(row)

    async def get(self, booking_id: int, requester_id: int) -> Booking:
        """Прямой просмотр брони доступен только владельцу"""
        row = await self.bookings.get(booking_id, with_relations=True)
        if row is None:
            raise NotFoundError("Booking not found")
        if row.user_id != requester_id:
            raise ForbiddenError()
        return booking_to_entity(row)

    async def list_for_user(self, requester_id: int) -> list[Booking]:
        rows = await self.bookings.for_user(requester_id)
        return [booking_to_entity(row) for row in rows]

    async def _ensure_available(
        self,
        room_id: int,
        candidate: Interval,
        exclude_booking_id: int | None = None,
    ) -> None:
        rows = await self.bookings.active_for_room(room_id)
        conflicts = find_conflicts(
            [booking_to_entity(row) for row in rows],
            candidate,
            exclude_booking_id=exclude_booking_id,
        )
        if conflicts:
            logger.info(
                f"[BOOKING] Комната {room_id} занята: пересечение с бронями "
                f"{[booking.id for booking in conflicts]}"
            )
            raise ConflictError()
