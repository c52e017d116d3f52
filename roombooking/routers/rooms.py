from fastapi import APIRouter

from roombooking.dependencies import CurrentClock, CurrentUser, Rooms
from roombooking.schemas.room import RoomResponse

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get(
    "",
    response_model=list[RoomResponse],
    description="Получение списка комнат с активными бронями",
)
async def get_rooms(current_user: CurrentUser, rooms: Rooms, clock: CurrentClock):
    now = clock.now()
    return [
        RoomResponse.build(room, current_user.id, now)
        for room in await rooms.list_rooms()
    ]


@router.get(
    "/{room_id}",
    response_model=RoomResponse,
    description="Получение комнаты с предстоящими и текущими бронями",
)
async def get_room(
    room_id: int, current_user: CurrentUser, rooms: Rooms, clock: CurrentClock
):
    room = await rooms.get_room(room_id)
    return RoomResponse.build(room, current_user.id, clock.now())
