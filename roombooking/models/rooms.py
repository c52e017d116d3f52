from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from roombooking.models.bookings import Booking


class Room(Base):
    """Переговорная комната"""

    __tablename__ = "rooms"
    __table_args__ = (CheckConstraint("capacity > 0", name="ck_rooms_capacity"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), comment="Название комнаты")
    capacity: Mapped[int] = mapped_column(
        Integer, comment="Сколько человек вмещает комната"
    )

    bookings: Mapped[list["Booking"]] = relationship(
        "Booking", back_populates="room", lazy="raise"
    )
