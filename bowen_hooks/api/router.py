"""Main API router"""

from fastapi import APIRouter

from .routes import auth
from ..core.config import settings

# Main API router
api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])


@api_router.get("")
async def welcome():
    """API welcome endpoint"""
    return {
        "status": "success",
        "message": f"Welcome to {settings.PROJECT_NAME} API",
        "version": settings.VERSION,
        "endpoints": {
            "auth": f"{settings.API_V1_PREFIX}/auth",
            "health": "/api/health",
        },
    }
