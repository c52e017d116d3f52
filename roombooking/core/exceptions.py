from fastapi import status


class BookingError(Exception):
    """Базовая ошибка операций с бронями. Все ошибки восстановимы вызывающим."""

    status_code: int = status.HTTP_422_UNPROCESSABLE_ENTITY
    message: str = "Booking operation failed"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"detail": self.message}


class ValidationError(BookingError):
    """Ошибка валидации конкретного поля"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"detail": self.message, "errors": {self.field: [self.message]}}


class NotFoundError(BookingError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ForbiddenError(BookingError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "This action is forbidden"


class ConflictError(BookingError):
    message = "Room is unavailable at this time"


class LockedStateError(BookingError):
    """Бронь в текущем статусе нельзя изменять"""

    message = "Booking cannot be altered in its current state"


class BookingCompletedError(LockedStateError):
    message = "Cannot alter a past booking"


class BookingInProgressError(LockedStateError):
    message = "Cannot alter a booking in progress"


class BookingCancelledError(LockedStateError):
    message = "Cannot alter a cancelled booking"
