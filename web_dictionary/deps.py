"""Request-scoped dependencies shared by the API routers."""

from typing import Iterator

from fastapi import Request

from .config import get_settings
from .core.engine import LookupEngine
from .store import WordStore, open_store

# The engine keeps no state between calls, so one instance serves every request.
lookup_engine = LookupEngine()


def get_engine() -> LookupEngine:
    return lookup_engine


def get_store(request: Request) -> Iterator[WordStore]:
    """
    Yield a store handle owned by the current request.
    
    PostgreSQL connections are opened per request and closed on every exit
    path. The memory backend hands out the corpus loaded at startup.
    """
    settings = get_settings()
    if settings.store_backend == "memory":
        yield request.app.state.memory_store
        return
    
    store = open_store(settings)
    try:
        yield store
    finally:
        store.close()
