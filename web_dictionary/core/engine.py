"""Two-tier dictionary lookup: prefix match first, edit distance second."""

import time
from typing import List

import structlog

from ..models.dictionary import Candidate, DictionaryEntry
from ..models.response import LookupResponse
from ..store.base import WordStore
from .exceptions import EmptyQuery
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)

MAX_RESULTS = 10
MAX_EDIT_DISTANCE = 2

WELCOME_MESSAGE = "Welcome to the Web Dictionary. Search for a word!"


def status_message(status: str, query: str) -> str:
    """Plain-text message for a lookup outcome; callers escape it for HTML."""
    if status == "welcome":
        return WELCOME_MESSAGE
    if status == "not_found":
        return f"No results found for '{query}'."
    if status == "suggestions":
        return f"'{query}' was not found. Did you mean...?"
    return ""


class LookupEngine:
    """
    Ranks dictionary entries against a query.
    
    The engine holds no per-request state: every call receives the store
    handle it should read from, and the caller owns that handle.
    """
    
    def __init__(self) -> None:
        self.normalizer = TextNormalizer()
        self.fuzzy_matcher = FuzzyMatcher(max_distance=MAX_EDIT_DISTANCE)
    
    def lookup(self, query: str, store: WordStore) -> List[Candidate]:
        """
        Find up to ten candidates for a query.
        
        Tier 1 takes entries whose word starts with the query. When it finds
        anything those entries are returned and the full scan never runs,
        even if none of them is an exact match. Tier 2 scans the whole
        corpus and keeps words within MAX_EDIT_DISTANCE edits.
        
        Args:
            query: Word to look up
            store: Open word store handle
            
        Returns:
            Candidates sorted by (distance, word); empty when nothing matched
            
        Raises:
            EmptyQuery: The query is blank after trimming
            StoreUnavailable: The store failed while being read
        """
        normalized = self.normalizer.normalize(query)
        if not normalized:
            raise EmptyQuery(query)
        
        prefix_entries = store.find_by_prefix(normalized, limit=MAX_RESULTS)
        if prefix_entries:
            candidates = self._rank(normalized, prefix_entries)
            logger.debug("Prefix match", query=normalized, total=len(candidates))
            return candidates[:MAX_RESULTS]
        
        candidates = [
            candidate for candidate in self._rank(normalized, store.all_entries())
            if self.fuzzy_matcher.is_close(candidate.distance)
        ]
        logger.debug("Approximate match", query=normalized, total=len(candidates))
        return candidates[:MAX_RESULTS]
    
    def search(self, query: str, store: WordStore) -> LookupResponse:
        """
        Look up a raw query and describe the outcome for display.
        
        A blank query is not an error here: it yields the welcome state
        without touching the store.
        """
        start_time = time.time()
        query = (query or "").strip()
        
        if not query:
            return self._response(query, "welcome", [], start_time)
        
        candidates = self.lookup(query, store)
        if not candidates:
            status = "not_found"
        elif self.has_exact_match(query, candidates):
            status = "found"
        else:
            status = "suggestions"
        
        return self._response(query, status, candidates, start_time)
    
    def has_exact_match(self, query: str, candidates: List[Candidate]) -> bool:
        """Whether any candidate equals the query, ignoring case."""
        return any(self.normalizer.same_word(query, c.word) for c in candidates)
    
    def _rank(self, normalized_query: str, entries: List[DictionaryEntry]) -> List[Candidate]:
        candidates = [
            Candidate(
                word=entry.word,
                definition=entry.definition,
                distance=self.fuzzy_matcher.distance(normalized_query, entry.word),
            )
            for entry in entries
        ]
        candidates.sort(key=Candidate.sort_key)
        return candidates
    
    def _response(
        self,
        query: str,
        status: str,
        candidates: List[Candidate],
        start_time: float
    ) -> LookupResponse:
        execution_time = (time.time() - start_time) * 1000
        return LookupResponse(
            query=query,
            status=status,
            message=status_message(status, query),
            exact_match=status == "found",
            total_results=len(candidates),
            results=candidates,
            execution_time_ms=execution_time,
        )


def lookup(query: str, store: WordStore) -> List[Candidate]:
    """Module-level shortcut for LookupEngine().lookup()."""
    return LookupEngine().lookup(query, store)
