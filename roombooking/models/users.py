from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, UTCDateTime

if TYPE_CHECKING:
    from roombooking.models.bookings import Booking


class User(Base):
    """Локальная копия пользователя внешнего провайдера авторизации"""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), comment="Имя пользователя")
    email: Mapped[str] = mapped_column(String(255), unique=True, comment="Почта")
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        server_default=func.now(),
    )

    bookings: Mapped[list["Booking"]] = relationship(
        "Booking", back_populates="user", lazy="raise"
    )
