"""API endpoints for the web dictionary."""

from .search import router as search_router
from .health import router as health_router
from .pages import router as pages_router

__all__ = [
    "search_router",
    "health_router",
    "pages_router",
]
