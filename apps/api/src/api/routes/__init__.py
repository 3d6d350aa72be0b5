"""Route initialization module."""

from api.routes.data import router as data_router
from api.routes.dates import router as dates_router
from api.routes.health import router as health_router
from api.routes.ids import router as ids_router
from api.routes.user import router as user_router
from fastapi import APIRouter

# Create main API router
api_router = APIRouter(prefix="/api")


# Include sub-routers
api_router.include_router(data_router)
api_router.include_router(user_router)
api_router.include_router(ids_router)
api_router.include_router(dates_router)


__all__ = ["api_router", "health_router"]
