"""Health check endpoints.

Public endpoints for service health monitoring.
"""

from datetime import datetime

from fastapi import APIRouter

from core.config import HIBP_API_URL


router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Password Analyzer API"}


@router.get("/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "breach_api": HIBP_API_URL
    }
