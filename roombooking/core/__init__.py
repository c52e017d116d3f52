from .clock import Clock, FixedClock, SystemClock
from .entities import Booking, BookingStatus, Room, UserInfo
from .interval import Interval, overlaps

__all__ = [
    "Booking",
    "BookingStatus",
    "Clock",
    "FixedClock",
    "Interval",
    "Room",
    "SystemClock",
    "UserInfo",
    "overlaps",
]
