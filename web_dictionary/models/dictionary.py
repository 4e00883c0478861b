"""Dictionary data models shared by the store, engine and API."""

from pydantic import BaseModel, Field


class DictionaryEntry(BaseModel):
    """A stored word and its definition."""
    
    word: str = Field(..., min_length=1, description="Headword, case preserved")
    definition: str = Field(..., min_length=1, description="Definition text")


class Candidate(BaseModel):
    """A ranked match produced for a single lookup."""
    
    word: str = Field(..., description="The matched word")
    definition: str = Field(..., description="Definition of the matched word")
    distance: int = Field(..., ge=0, description="Edit distance between query and word")

    def sort_key(self) -> tuple:
        """Ranking order: closest first, then alphabetical."""
        return (self.distance, self.word)
