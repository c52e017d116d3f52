from dataclasses import dataclass
from datetime import datetime, timedelta

from .clock import to_utc

# Сдвиг границ, чтобы брони "встык" не считались пересечением
BOUNDARY_EPSILON = timedelta(seconds=1)


@dataclass(frozen=True)
class Interval:
    """Промежуток времени [start, end] в UTC"""

    start: datetime
    end: datetime

    def __post_init__(self):
        object.__setattr__(self, "start", to_utc(self.start))
        object.__setattr__(self, "end", to_utc(self.end))
        if self.start >= self.end:
            raise ValueError("Interval start must be before its end")


def overlaps(candidate: Interval, existing: Interval) -> bool:
    """
    Проверка конфликта двух промежутков.

    Конфликт, если начало существующей брони попадает в
    [candidate.start, candidate.end - 1s], её конец попадает в
    [candidate.start + 1s, candidate.end], либо она целиком покрывает
    кандидата. Бронь, заканчивающаяся ровно в момент начала другой,
    конфликтом не считается.
    """
    starts_inside = (
        candidate.start <= existing.start <= candidate.end - BOUNDARY_EPSILON
    )
    ends_inside = candidate.start + BOUNDARY_EPSILON <= existing.end <= candidate.end
    covers = existing.start <= candidate.start and existing.end >= candidate.end
    return starts_inside or ends_inside or covers
