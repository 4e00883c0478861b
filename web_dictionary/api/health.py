"""Health check API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import structlog

from ..config import get_settings
from ..core.exceptions import StoreUnavailable
from ..deps import get_store
from ..models.response import HealthResponse
from ..store import WordStore

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()
logger = structlog.get_logger(__name__)

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check that the service can reach its word store"
)
def health_check(store: WordStore = Depends(get_store)) -> HealthResponse:
    """
    Perform a health check on the dictionary service.
    
    A store that cannot be connected to at all is reported by the
    StoreUnavailable handler as a 503.
    """
    dependencies = {"word_store": "healthy"}
    
    try:
        store.count()
    except StoreUnavailable as e:
        logger.warning("Health check: word store query failed", error=str(e))
        dependencies["word_store"] = "unhealthy"
    
    status = "healthy" if dependencies["word_store"] == "healthy" else "unhealthy"
    
    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=time.time() - app_start_time,
        dependencies=dependencies
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Report that the process is up, without touching the store."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
