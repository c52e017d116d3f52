from fastapi import APIRouter
from .bookings import router as bookings_router
from .rooms import router as rooms_router

router = APIRouter(prefix="/api/v1")

router.include_router(rooms_router)
router.include_router(bookings_router)
