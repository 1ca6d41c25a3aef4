from fastapi import APIRouter

from .airlines import router as airlines_router
from .airports import router as airports_router
from .countries import router as countries_router
from .flights import layovers_router, router as flights_router
from .passengers import emails_router, phones_router, router as passengers_router
from .planes import router as planes_router
from .tickets import checkins_router, delayed_router, router as tickets_router

api_router = APIRouter()

api_router.include_router(airlines_router)
api_router.include_router(airports_router)
api_router.include_router(planes_router)
api_router.include_router(tickets_router)
api_router.include_router(checkins_router)
api_router.include_router(emails_router)
api_router.include_router(layovers_router)
api_router.include_router(countries_router)
api_router.include_router(delayed_router)
api_router.include_router(passengers_router)
api_router.include_router(phones_router)
api_router.include_router(flights_router)

__all__ = ["api_router"]
