from .base import Base
from .users import User
from .rooms import Room
from .bookings import Booking

__all__ = ["Base", "User", "Room", "Booking"]
