"""Data models for the web dictionary."""

from .dictionary import DictionaryEntry, Candidate
from .response import (
    LookupResponse,
    ImportReport,
    ErrorResponse,
    HealthResponse,
)
from .request import LookupRequest

__all__ = [
    "DictionaryEntry",
    "Candidate",
    "LookupResponse",
    "ImportReport",
    "ErrorResponse",
    "HealthResponse",
    "LookupRequest",
]
