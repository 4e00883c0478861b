"""Text normalization utilities for consistent word processing."""


class TextNormalizer:
    """Normalizes queries and dictionary words the same way."""
    
    def normalize(self, text: str) -> str:
        """
        Normalize text for matching and distance computation.
        
        Args:
            text: Input text to normalize
            
        Returns:
            Text with surrounding whitespace removed, lower-cased
        """
        if not text:
            return ""
        
        return text.strip().lower()
    
    def same_word(self, first: str, second: str) -> bool:
        """Case-insensitive equality of two words after normalization."""
        return self.normalize(first) == self.normalize(second)
