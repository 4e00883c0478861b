"""Main FastAPI application for the Web Dictionary."""

import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
import structlog

from .api import search_router, health_router, pages_router
from .config import get_settings
from .core.exceptions import EmptyQuery, StoreUnavailable
from .importer import import_csv
from .logging_config import configure_logging
from .models.response import ErrorResponse
from .store import MemoryWordStore

settings = get_settings()
configure_logging(settings.log_level, settings.log_format)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info(
        "Starting Web Dictionary service",
        version=settings.app_version,
        store_backend=settings.store_backend
    )

    if settings.store_backend == "memory":
        app.state.memory_store = MemoryWordStore()
        if settings.seed_csv:
            if not Path(settings.seed_csv).is_file():
                logger.error("Seed CSV not found", path=settings.seed_csv)
                raise FileNotFoundError(f"Seed CSV not found: {settings.seed_csv}")
            report = import_csv(settings.seed_csv, app.state.memory_store)
            logger.info("Seed dictionary loaded", path=settings.seed_csv, inserted=report.inserted)

    yield

    logger.info("Shutting down Web Dictionary service")


app = FastAPI(
    title=settings.app_name,
    description="Web dictionary with prefix lookup and edit-distance suggestions",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else None
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


def _error_response(request: Request, status_code: int, error: ErrorResponse) -> Response:
    """JSON for API clients, a bare HTML page for browsers."""
    if request.url.path.startswith("/api"):
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))
    return HTMLResponse(
        status_code=status_code,
        content=f"<!DOCTYPE html><html><body><p>{error.message}</p></body></html>"
    )


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> Response:
    """Word store failures end the request with a generic message."""
    logger.error(
        "Word store unavailable",
        method=request.method,
        path=request.url.path,
        error=str(exc)
    )

    return _error_response(
        request,
        503,
        ErrorResponse(
            error="Service Unavailable",
            message="The dictionary is temporarily unavailable. Please try again later."
        )
    )


@app.exception_handler(EmptyQuery)
async def empty_query_handler(request: Request, exc: EmptyQuery) -> Response:
    return _error_response(
        request,
        400,
        ErrorResponse(error="Bad Request", message="Query cannot be empty")
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=True
    )

    return _error_response(
        request,
        500,
        ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        )
    )


app.include_router(pages_router)
app.include_router(search_router)
app.include_router(health_router)


@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "search": "/api/v1/search?q=word",
            "health": "/api/v1/health",
        },
        "features": [
            "Case-insensitive prefix lookup",
            "Edit-distance suggestions for misspelled words",
        ],
        "max_query_length": settings.max_query_length,
    }


def run() -> None:
    """Console entry point for ``web-dictionary``."""
    import uvicorn

    uvicorn.run(
        "web_dictionary.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
