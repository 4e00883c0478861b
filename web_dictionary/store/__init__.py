"""Word store backends."""

from .base import WordStore
from .memory import MemoryWordStore
from .postgres import PostgresWordStore, escape_like
from ..config import Settings


def open_store(settings: Settings) -> WordStore:
    """
    Open a fresh store handle for the configured backend.
    
    The caller owns the handle and must close it.
    """
    if settings.store_backend == "memory":
        return MemoryWordStore()
    if settings.store_backend == "postgres":
        return PostgresWordStore.connect(settings.db_config)
    raise ValueError(f"Unknown store backend: {settings.store_backend}")


__all__ = [
    "WordStore",
    "MemoryWordStore",
    "PostgresWordStore",
    "escape_like",
    "open_store",
]
