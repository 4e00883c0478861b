"""In-process word store backed by a dictionary."""

from typing import Dict, Iterable, List, Optional

from ..core.exceptions import DuplicateEntry
from ..core.normalizer import TextNormalizer
from ..models.dictionary import DictionaryEntry
from .base import WordStore


class MemoryWordStore(WordStore):
    """Keeps entries in memory, keyed by normalized word."""
    
    def __init__(self, entries: Optional[Iterable[DictionaryEntry]] = None) -> None:
        self.normalizer = TextNormalizer()
        self._entries: Dict[str, DictionaryEntry] = {}
        for entry in entries or []:
            self.insert(entry)
    
    @classmethod
    def from_mapping(cls, mapping: Dict[str, str]) -> "MemoryWordStore":
        """Build a store from a ``{word: definition}`` mapping."""
        return cls(
            DictionaryEntry(word=word, definition=definition)
            for word, definition in mapping.items()
        )
    
    def find_by_prefix(self, prefix: str, limit: int = 10) -> List[DictionaryEntry]:
        prefix = self.normalizer.normalize(prefix)
        matches = [
            entry for key, entry in self._entries.items()
            if key.startswith(prefix)
        ]
        matches.sort(key=lambda entry: entry.word)
        return matches[:limit]
    
    def all_entries(self) -> List[DictionaryEntry]:
        return list(self._entries.values())
    
    def insert(self, entry: DictionaryEntry) -> None:
        key = self.normalizer.normalize(entry.word)
        if key in self._entries:
            raise DuplicateEntry(entry.word)
        self._entries[key] = entry
    
    def count(self) -> int:
        return len(self._entries)
