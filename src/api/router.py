"""API router aggregation."""

from fastapi import APIRouter

from src.api.actions import router as actions_router
from src.api.admin import router as admin_router
from src.api.dashboard import router as dashboard_router
from src.api.health import router as health_router
from src.api.meetings import router as meetings_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(meetings_router)
# Read-side analytics over logged meetings
api_router.include_router(dashboard_router)
# Role rates and settings
api_router.include_router(admin_router)
# Natural-language agent facade
api_router.include_router(actions_router)
