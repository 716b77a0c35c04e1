"""Root info and health check routes."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict:
    """Informational endpoint, also used by platform health probes."""
    return {
        "status": "OK",
        "message": "YouTube Age Checker Backend is running",
        "endpoints": ["/api/youtube-age", "/health"],
    }


@router.get("/health")
async def health() -> dict:
    """Lightweight liveness check, no external calls."""
    return {"status": "OK"}
