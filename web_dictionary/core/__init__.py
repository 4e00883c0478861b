"""Core lookup functionality."""

from .engine import LookupEngine, lookup, MAX_RESULTS, MAX_EDIT_DISTANCE
from .exceptions import (
    DictionaryError,
    StoreUnavailable,
    DuplicateEntry,
    MalformedRow,
    EmptyQuery,
)
from .fuzzy_matcher import FuzzyMatcher, levenshtein_distance
from .normalizer import TextNormalizer

__all__ = [
    "LookupEngine",
    "lookup",
    "MAX_RESULTS",
    "MAX_EDIT_DISTANCE",
    "DictionaryError",
    "StoreUnavailable",
    "DuplicateEntry",
    "MalformedRow",
    "EmptyQuery",
    "FuzzyMatcher",
    "levenshtein_distance",
    "TextNormalizer",
]
