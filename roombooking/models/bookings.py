from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roombooking.core.entities import BookingStatus
from .base import Base, UTCDateTime

if TYPE_CHECKING:
    from roombooking.models.rooms import Room
    from roombooking.models.users import User


class Booking(Base):
    """Бронь комнаты пользователем"""

    __tablename__ = "bookings"
    __table_args__ = (Index("ix_bookings_room_status", "room_id", "status"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    room_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rooms.id"), comment="Забронированная комната"
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), index=True, comment="Владелец брони"
    )
    responsible_name: Mapped[str] = mapped_column(
        String(255), comment="Ответственный за встречу"
    )
    start_time: Mapped[datetime] = mapped_column(UTCDateTime(), comment="Начало")
    end_time: Mapped[datetime] = mapped_column(UTCDateTime(), comment="Окончание")
    status: Mapped[BookingStatus] = mapped_column(
        Enum(
            BookingStatus,
            name="booking_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=BookingStatus.SCHEDULED,
        comment="Хранимый статус брони",
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), server_default=func.now(), onupdate=func.now()
    )

    room: Mapped["Room"] = relationship("Room", back_populates="bookings", lazy="raise")
    user: Mapped["User"] = relationship("User", back_populates="bookings", lazy="raise")
