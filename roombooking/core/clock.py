from datetime import datetime, timedelta, timezone
from typing import Protocol


def to_utc(value: datetime) -> datetime:
    """Приводит datetime к aware UTC. Naive значения считаются UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Текущее время сервера в UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Часы с зафиксированным временем, для тестов и пересчётов"""

    def __init__(self, current: datetime):
        self.current = to_utc(current)

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta
