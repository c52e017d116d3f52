from fastapi import APIRouter, status

from roombooking.dependencies import Bookings, CurrentClock, CurrentUser
from roombooking.schemas.booking import BookingCreate, BookingResponse, BookingUpdate

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get(
    "",
    response_model=list[BookingResponse],
    description="Получение списка моих броней по времени начала",
)
async def get_bookings(
    current_user: CurrentUser, bookings: Bookings, clock: CurrentClock
):
    now = clock.now()
    return [
        BookingResponse.build(booking, now)
        for booking in await bookings.list_for_user(current_user.id)
    ]


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    description="Создание брони комнаты",
)
async def create_booking(
    data: BookingCreate,
    current_user: CurrentUser,
    bookings: Bookings,
    clock: CurrentClock,
):
    booking = await bookings.create(
        room_id=data.room_id,
        user_id=current_user.id,
        responsible_name=data.responsible_name,
        start_time=data.start_time,
        end_time=data.end_time,
    )
    return BookingResponse.build(booking, clock.now())


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    description="Получение своей брони по ID",
)
async def get_booking(
    booking_id: int, current_user: CurrentUser, bookings: Bookings, clock: CurrentClock
):
    booking = await bookings.get(booking_id, current_user.id)
    return BookingResponse.build(booking, clock.now())


@router.api_route(
    "/{booking_id}",
    methods=["PUT", "PATCH"],
    response_model=BookingResponse,
    description="Изменение или отмена своей брони",
)
async def update_booking(
    booking_id: int,
    data: BookingUpdate,
    current_user: CurrentUser,
    bookings: Bookings,
    clock: CurrentClock,
):
    booking = await bookings.update(booking_id, current_user.id, data.to_patch())
    return BookingResponse.build(booking, clock.now())
