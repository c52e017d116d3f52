from datetime import datetime, timedelta, timezone

from jose import jwt

from roombooking.config import settings
from roombooking.core.entities import BookingStatus
from roombooking.models import Booking, User

# Все тесты живут "сегодня" 24.10.2024 в 09:00 UTC
NOW = datetime(2024, 10, 24, 9, 0, tzinfo=timezone.utc)
TOMORROW = datetime(2024, 10, 25, tzinfo=timezone.utc)


def at(hour: int, minute: int = 0, day: datetime = TOMORROW) -> datetime:
    return day.replace(hour=hour, minute=minute)


def fmt(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")


def make_token(user_id: int) -> str:
    return jwt.encode(
        {"sub": str(user_id)},
        settings.auth.secret_key.get_secret_value(),
        algorithm=settings.auth.algorithm,
    )


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user.id)}"}


async def add_booking(
    session,
    room_id: int,
    user_id: int,
    start: datetime,
    end: datetime,
    status: BookingStatus = BookingStatus.SCHEDULED,
    responsible_name: str = "Иван Петров",
) -> Booking:
    """Кладёт бронь в базу в обход сервиса, в том числе в любом статусе"""
    booking = Booking(
        room_id=room_id,
        user_id=user_id,
        responsible_name=responsible_name,
        start_time=start,
        end_time=end,
        status=status,
    )
    session.add(booking)
    await session.commit()
    return booking


def in_progress_window(now: datetime = NOW) -> tuple[datetime, datetime]:
    return now - timedelta(hours=1), now + timedelta(hours=1)
