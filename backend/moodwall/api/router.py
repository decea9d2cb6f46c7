"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from moodwall.api.routes import (
    session, users, checkins, wall, support, moods, dashboard
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(session.router)
api_router.include_router(users.router)
api_router.include_router(checkins.router)
api_router.include_router(wall.router)
api_router.include_router(support.router)
api_router.include_router(moods.router)
api_router.include_router(dashboard.router)
