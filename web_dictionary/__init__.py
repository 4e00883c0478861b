"""
Web Dictionary - word lookup with typo-tolerant suggestions.

A submitted word is matched by prefix against a word/definition store; when
nothing starts with it, every stored word within two edits is suggested.
"""

__version__ = "1.0.0"

from .core.engine import LookupEngine, lookup
from .models.dictionary import Candidate, DictionaryEntry
from .models.response import LookupResponse

__all__ = [
    "LookupEngine",
    "lookup",
    "Candidate",
    "DictionaryEntry",
    "LookupResponse",
]
