from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, PlainSerializer

from roombooking.core.clock import to_utc
from roombooking.core.entities import Room

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime) -> str:
    return to_utc(value).strftime(TIMESTAMP_FORMAT)


def normalize_timestamp(value: datetime) -> datetime:
    return to_utc(value).replace(microsecond=0)


# Время на границе API: "YYYY-MM-DD HH:MM:SS" в UTC.
# Значения без зоны считаются UTC, значения со смещением приводятся к UTC.
# Доли секунды отбрасываются до проверок, хранится то же, что возвращается.
Timestamp = Annotated[
    datetime,
    AfterValidator(normalize_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]


class RoomShort(BaseModel):
    """Краткая информация о комнате"""

    id: int = Field(..., description="ID комнаты")
    name: str = Field(..., description="Название комнаты")
    capacity: int = Field(..., description="Вместимость комнаты")

    @classmethod
    def from_entity(cls, room: Room) -> "RoomShort":
        return cls(id=room.id, name=room.name, capacity=room.capacity)


class UserShort(BaseModel):
    """Владелец брони"""

    name: str = Field(..., description="Имя пользователя")
    email: str = Field(..., description="Почта пользователя")
