"""Search API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import get_settings
from ..core.engine import LookupEngine
from ..deps import get_engine, get_store
from ..models.request import LookupRequest
from ..models.response import LookupResponse
from ..store import WordStore

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()


@router.get(
    "/search",
    response_model=LookupResponse,
    summary="Look up a word",
    description="Prefix lookup with edit-distance suggestions when nothing starts with the query"
)
def search_word(
    q: str = Query("", description="The word to look up"),
    engine: LookupEngine = Depends(get_engine),
    store: WordStore = Depends(get_store),
) -> LookupResponse:
    """
    Look up a word in the dictionary.
    
    A missing or blank query returns the welcome state with no results.
    """
    if len(q.strip()) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )
    
    return engine.search(q, store)


@router.post(
    "/search",
    response_model=LookupResponse,
    summary="Look up a word with request body",
    description="Look up a word using a structured request body"
)
def search_with_body(
    request: LookupRequest,
    engine: LookupEngine = Depends(get_engine),
    store: WordStore = Depends(get_store),
) -> LookupResponse:
    """Look up a word using a JSON request body."""
    return engine.search(request.query, store)
