"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .dictionary import Candidate


class LookupResponse(BaseModel):
    """Response for dictionary lookups."""
    
    query: str = Field(..., description="Query as submitted, trimmed")
    status: str = Field(..., description="welcome, not_found, suggestions or found")
    message: str = Field(..., description="Text to show above the results; empty for a direct hit")
    exact_match: bool = Field(..., description="Whether a case-insensitive exact match was found")
    total_results: int = Field(..., description="Total number of results")
    results: List[Candidate] = Field(..., description="Ranked candidates")
    execution_time_ms: float = Field(..., description="Lookup execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ImportReport(BaseModel):
    """Summary of a CSV bulk import."""
    
    processed: int = Field(default=0, description="Data rows read, header excluded")
    inserted: int = Field(default=0, description="Rows inserted into the store")
    duplicates: int = Field(default=0, description="Rows whose word already existed")
    skipped: int = Field(default=0, description="Malformed rows skipped")
    failed: int = Field(default=0, description="Rows that failed for any other reason")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
