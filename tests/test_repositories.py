"""Тесты блокировок строк при записи броней."""

import pytest
from sqlalchemy.dialects import postgresql

from roombooking.core.entities import BookingStatus
from roombooking.core.lifecycle import BookingPatch
from roombooking.repositories.bookings import booking_by_id
from roombooking.repositories.rooms import room_by_id
from roombooking.services import BookingService
from tests.helpers import add_booking, at


def compile_pg(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


@pytest.fixture
def service(db, clock) -> BookingService:
    return BookingService(db, clock)


@pytest.fixture
def calls(service, monkeypatch) -> list[tuple]:
    """Порядок обращений сервиса к комнате и к активным броням"""
    recorded = []
    get_room = service.rooms.get
    active_for_room = service.bookings.active_for_room

    async def spy_get_room(room_id, for_update=False):
        recorded.append(("room", room_id, for_update))
        return await get_room(room_id, for_update=for_update)

    async def spy_active_for_room(room_id, ending_after=None):
        recorded.append(("active", room_id))
        return await active_for_room(room_id, ending_after=ending_after)

    monkeypatch.setattr(service.rooms, "get", spy_get_room)
    monkeypatch.setattr(service.bookings, "active_for_room", spy_active_for_room)
    return recorded


# ─── Запросы ─────────────────────────────────────────────────────────────────


def test_room_query_locks_row_in_postgres():
    sql = compile_pg(room_by_id(1, for_update=True))
    assert sql.rstrip().endswith("FOR UPDATE")


def test_room_query_without_lock():
    assert "FOR UPDATE" not in compile_pg(room_by_id(1))


def test_booking_query_locks_only_booking_row():
    sql = compile_pg(booking_by_id(1, for_update=True))
    assert "FOR UPDATE OF bookings" in sql


# ─── Порядок в сервисе ───────────────────────────────────────────────────────


async def test_create_locks_room_before_reading_bookings(service, calls, room, users):
    owner, _ = users
    await service.create(room.id, owner.id, "Иван Петров", at(10), at(11))

    assert calls == [("room", room.id, True), ("active", room.id)]


async def test_time_change_locks_room_before_reading_bookings(
    service, calls, db, room, users
):
    owner, _ = users
    row = await add_booking(db, room.id, owner.id, at(10), at(11))

    await service.update(row.id, owner.id, BookingPatch(start_time=at(12), end_time=at(13)))

    assert calls == [("room", room.id, True), ("active", room.id)]


async def test_rename_does_not_touch_room(service, calls, db, room, users):
    owner, _ = users
    row = await add_booking(db, room.id, owner.id, at(10), at(11))

    await service.update(row.id, owner.id, BookingPatch(responsible_name="Пётр"))

    assert calls == []


async def test_cancellation_does_not_touch_room(service, calls, db, room, users):
    owner, _ = users
    row = await add_booking(db, room.id, owner.id, at(10), at(11))

    await service.update(row.id, owner.id, BookingPatch(status=BookingStatus.CANCELLED))

    assert calls == []
