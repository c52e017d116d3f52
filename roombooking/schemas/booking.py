from datetime import datetime

from pydantic import BaseModel, Field

from roombooking.core.entities import Booking, BookingStatus
from roombooking.core.lifecycle import BookingPatch, booking_effective_status
from roombooking.schemas.common import RoomShort, Timestamp, UserShort


class BookingCreate(BaseModel):
    """Схема создания брони"""

    room_id: int = Field(..., description="ID бронируемой комнаты", examples=[1])
    responsible_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Имя ответственного за бронь",
        examples=["Иван Петров"],
    )
    start_time: Timestamp = Field(
        ..., description="Начало (YYYY-MM-DD HH:MM:SS, UTC)", examples=["2024-10-25 10:00:00"]
    )
    end_time: Timestamp = Field(
        ..., description="Окончание (YYYY-MM-DD HH:MM:SS, UTC)", examples=["2024-10-25 11:00:00"]
    )


class BookingUpdate(BaseModel):
    """Схема для изменения или отмены брони"""

    responsible_name: str | None = Field(
        None, min_length=1, max_length=255, description="Новое имя ответственного"
    )
    start_time: Timestamp | None = Field(None, description="Новое начало")
    end_time: Timestamp | None = Field(None, description="Новое окончание")
    # Клиент может выставить только cancelled, остальное отклоняется при проверке
    status: BookingStatus | None = Field(
        None, description='Передайте "cancelled" чтобы отменить бронь'
    )

    def to_patch(self) -> BookingPatch:
        return BookingPatch(
            responsible_name=self.responsible_name,
            start_time=self.start_time,
            end_time=self.end_time,
            status=self.status,
        )


class BookingPublicResponse(BaseModel):
    """Бронь глазами не владельца: только время и статус"""

    start_time: Timestamp = Field(..., description="Начало брони")
    end_time: Timestamp = Field(..., description="Окончание брони")
    status: BookingStatus = Field(..., description="Текущий статус брони")


class BookingResponse(BookingPublicResponse):
    """Схема ответа с бронью для её владельца"""

    id: int = Field(..., description="ID брони")
    responsible_name: str = Field(..., description="Ответственный")
    room: RoomShort | None = Field(None, description="Забронированная комната")
    user: UserShort | None = Field(None, description="Владелец брони")

    @classmethod
    def build(cls, booking: Booking, now: datetime) -> "BookingResponse":
        return cls(
            id=booking.id,
            responsible_name=booking.responsible_name,
            start_time=booking.start_time,
            end_time=booking.end_time,
            status=booking_effective_status(booking, now),
            room=RoomShort.from_entity(booking.room) if booking.room else None,
            user=(
                UserShort(name=booking.user.name, email=booking.user.email)
                if booking.user
                else None
            ),
        )


def booking_view(
    booking: Booking, viewer_id: int, now: datetime
) -> BookingResponse | BookingPublicResponse:
    """Владелец видит бронь целиком, остальные только время и статус"""
    if booking.is_owned_by(viewer_id):
        return BookingResponse.build(booking, now)
    return BookingPublicResponse(
        start_time=booking.start_time,
        end_time=booking.end_time,
        status=booking_effective_status(booking, now),
    )
