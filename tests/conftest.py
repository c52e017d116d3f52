import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("AUTH_SECRET_KEY", "test-secret")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from roombooking.core.clock import FixedClock  # noqa: E402
from roombooking.dependencies import get_clock, get_db  # noqa: E402
from roombooking.main import app  # noqa: E402
from roombooking.models import Base, Room, User  # noqa: E402
from tests.helpers import NOW  # noqa: E402


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
async def session_maker():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, autoflush=False, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def room(session_maker) -> Room:
    async with session_maker() as session:
        room = Room(name="Переговорная А", capacity=10)
        session.add(room)
        await session.commit()
        return room


@pytest.fixture
async def users(session_maker) -> tuple[User, User]:
    async with session_maker() as session:
        owner = User(name="Иван Петров", email="ivan@example.com")
        other = User(name="Мария Сидорова", email="maria@example.com")
        session.add_all([owner, other])
        await session.commit()
        return owner, other


@pytest.fixture
async def client(session_maker, clock):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
