import enum
from dataclasses import dataclass, field, replace
from datetime import datetime

from .interval import Interval


class BookingStatus(str, enum.Enum):
    """Хранимый статус брони"""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


ACTIVE_STATUSES = frozenset({BookingStatus.SCHEDULED, BookingStatus.IN_PROGRESS})


@dataclass(frozen=True)
class UserInfo:
    id: int
    name: str
    email: str


@dataclass(frozen=True)
class Booking:
    """Бронь переговорной, без привязки к базе данных"""

    id: int | None
    room_id: int
    user_id: int
    responsible_name: str
    start_time: datetime
    end_time: datetime
    status: BookingStatus = BookingStatus.SCHEDULED
    room: "Room | None" = field(default=None, compare=False, repr=False)
    user: UserInfo | None = field(default=None, compare=False, repr=False)

    @property
    def interval(self) -> Interval:
        return Interval(self.start_time, self.end_time)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    def with_changes(self, **changes) -> "Booking":
        return replace(self, **changes)


@dataclass(frozen=True)
class Room:
    """Переговорная комната и снимок её броней"""

    id: int
    name: str
    capacity: int
    bookings: tuple[Booking, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.capacity <= 0:
            raise ValueError("Room capacity must be positive")
