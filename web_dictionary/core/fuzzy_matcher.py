"""Edit distance between words for typo-tolerant matching."""

from rapidfuzz.distance import Levenshtein

from .normalizer import TextNormalizer


def levenshtein_distance(first: str, second: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions needed to turn ``first`` into ``second``.
    
    Args:
        first: Source string (already normalized)
        second: Target string (already normalized)
        
    Returns:
        Edit distance, 0 only when both strings are identical
    """
    return Levenshtein.distance(first, second)


class FuzzyMatcher:
    """Computes edit distances on normalized words."""
    
    def __init__(self, max_distance: int = 2) -> None:
        """
        Initialize the fuzzy matcher.
        
        Args:
            max_distance: Largest edit distance still considered a match
        """
        self.max_distance = max_distance
        self.normalizer = TextNormalizer()
    
    def distance(self, query: str, word: str) -> int:
        """Edit distance between a query and a word, both normalized first."""
        return levenshtein_distance(
            self.normalizer.normalize(query),
            self.normalizer.normalize(word),
        )
    
    def is_close(self, distance: int) -> bool:
        """Whether a distance falls within the match threshold (inclusive)."""
        return distance <= self.max_distance
