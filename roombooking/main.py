import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roombooking.config import settings
from roombooking.core.exceptions import BookingError
from roombooking.dependencies import engine
from roombooking.models import Base
from roombooking.routers import router

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.app.log_level) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    if settings.app.create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("[DB] Таблицы созданы")
    yield
    # Shutdown
    await engine.dispose()


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


configure_logging()

# Создание приложения
app = FastAPI(
    title=settings.app.title,
    description="API для бронирования переговорных комнат",
    version="1.0.0",
    docs_url="/docs",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.app.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(BookingError, booking_error_handler)

# Подключение роутеров
app.include_router(router)


@app.get("/health", tags=["health"], description="Проверка что сервис жив")
async def health():
    return {"status": "ok"}
