"""Exceptions raised by the dictionary core, store and importer."""

from typing import Optional


class DictionaryError(Exception):
    """Base class for all web dictionary errors."""


class StoreUnavailable(DictionaryError):
    """The word store could not be reached or a query against it failed."""


class DuplicateEntry(DictionaryError):
    """A word that already exists in the store was inserted again."""
    
    def __init__(self, word: str) -> None:
        super().__init__(f"Word '{word}' already exists")
        self.word = word


class MalformedRow(DictionaryError):
    """An import row is missing columns or has an empty word or definition."""
    
    def __init__(self, row_number: int, reason: str) -> None:
        super().__init__(f"Row {row_number} skipped: {reason}")
        self.row_number = row_number
        self.reason = reason


class EmptyQuery(DictionaryError):
    """A lookup was requested with a blank query."""
    
    def __init__(self, query: Optional[str] = None) -> None:
        super().__init__("Query cannot be empty")
        self.query = query
