"""Request models for API endpoints."""

from pydantic import BaseModel, Field, field_validator

from ..config import get_settings


class LookupRequest(BaseModel):
    """Request model for dictionary lookups."""
    
    query: str = Field(..., min_length=1, description="Word to look up")

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate and trim query input."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        
        v = v.strip()
        max_length = get_settings().max_query_length
        if len(v) > max_length:
            raise ValueError(f"Query too long. Maximum length is {max_length} characters")
        return v
