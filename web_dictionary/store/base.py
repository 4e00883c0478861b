"""Word store interface used by the lookup engine and the importer."""

from abc import ABC, abstractmethod
from typing import List

from ..models.dictionary import DictionaryEntry


class WordStore(ABC):
    """A two-column word/definition table."""
    
    @abstractmethod
    def find_by_prefix(self, prefix: str, limit: int = 10) -> List[DictionaryEntry]:
        """
        Entries whose word starts with ``prefix``, case-insensitively.
        
        Args:
            prefix: Normalized (lower-case, trimmed) prefix
            limit: Maximum number of entries to return
            
        Returns:
            Entries ordered alphabetically by word
        """
        ...  # pragma: no cover
    
    @abstractmethod
    def all_entries(self) -> List[DictionaryEntry]:
        """Every entry in the store."""
        ...  # pragma: no cover
    
    @abstractmethod
    def insert(self, entry: DictionaryEntry) -> None:
        """
        Add an entry.
        
        Raises:
            DuplicateEntry: The word is already stored
            StoreUnavailable: The store could not execute the insert
        """
        ...  # pragma: no cover
    
    @abstractmethod
    def count(self) -> int:
        """Number of stored entries."""
        ...  # pragma: no cover
    
    def close(self) -> None:
        """Release the underlying connection, if any."""
    
    def __enter__(self) -> "WordStore":
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
