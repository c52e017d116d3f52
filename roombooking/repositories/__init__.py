from .bookings import BookingRepository
from .rooms import RoomRepository

__all__ = ["BookingRepository", "RoomRepository"]
