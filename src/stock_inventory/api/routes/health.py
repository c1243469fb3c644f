"""Health check endpoints."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check():
    """Basic health check."""
    return {"status": "healthy"}


@router.get("/health/ready")
def readiness_check(request: Request):
    """Readiness check - reports stage count and stored records."""
    service = request.app.state.stock_service
    return {
        "status": "ready",
        "stages": len(service.pipeline.stages),
        "stocks": len(service.repository),
    }
