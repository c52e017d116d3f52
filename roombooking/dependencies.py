from typing import Annotated, AsyncIterable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from roombooking.config import settings
from roombooking.core.clock import Clock, SystemClock
from roombooking.models.users import User
from roombooking.services import BookingService, RoomService


engine = create_async_engine(settings.database_dsn(), echo=settings.database.echo)
session_maker = async_sessionmaker(engine, autoflush=False, expire_on_commit=False)

bearer_scheme = HTTPBearer(auto_error=False)
system_clock = SystemClock()


async def get_db() -> AsyncIterable[AsyncSession]:
    async with session_maker() as session:
        yield session


def get_clock() -> Clock:
    return system_clock


def decode_user_id(token: str) -> int:
    """Достаёт id пользователя из access токена внешнего провайдера"""
    payload = jwt.decode(
        token,
        settings.auth.secret_key.get_secret_value(),
        algorithms=[settings.auth.algorithm],
    )
    user_id = payload.get("sub")
    if user_id is None:
        raise JWTError("Token has no subject")
    return int(user_id)


async def get_current_user_from_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    if credentials:
        token = credentials.credentials
    else:
        token = request.cookies.get(settings.auth.cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        user_id = decode_user_id(token)
    except (JWTError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return user


def get_booking_service(
    db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock)
) -> BookingService:
    return BookingService(db, clock)


def get_room_service(
    db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock)
) -> RoomService:
    return RoomService(db, clock)


# Type Alias для аннотаций
CurrentUser = Annotated[User, Depends(get_current_user_from_token)]
CurrentClock = Annotated[Clock, Depends(get_clock)]
Bookings = Annotated[BookingService, Depends(get_booking_service)]
Rooms = Annotated[RoomService, Depends(get_room_service)]
