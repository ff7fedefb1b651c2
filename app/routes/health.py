"""Health check and status endpoints"""
from fastapi import APIRouter, Depends
from datetime import datetime, timezone
from app.models.schemas import HealthCheck
from app.core.config import settings
from app.core.dependencies import get_user_store
from app.services.user_store import UserStore

router = APIRouter(tags=["Health"])


@router.get("/", summary="Root Endpoint")
async def root():
    """Root endpoint - API welcome message"""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/health"
    }


@router.get("/health", response_model=HealthCheck, summary="Health Check")
async def health_check(store: UserStore = Depends(get_user_store)):
    """
    Check API health status.

    **Returns:**
    - Service status
    - Number of stored users
    - API version
    - Current timestamp
    """
    return HealthCheck(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        user_count=store.count(),
        version=settings.VERSION
    )


@router.get("/status", summary="Detailed Status")
async def status(store: UserStore = Depends(get_user_store)):
    """Get detailed service status including store size and routes"""
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "operational",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "store": {
            "type": "in-memory",
            "users": store.count()
        },
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "users": f"{settings.API_PREFIX}/users"
        }
    }
