"""Server-rendered HTML search page."""

import html as html_mod
from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from ..config import get_settings
from ..core.engine import LookupEngine
from ..deps import get_engine, get_store
from ..models.dictionary import Candidate
from ..models.response import LookupResponse
from ..store import WordStore

router = APIRouter(tags=["pages"])
settings = get_settings()


def render_card(candidate: Candidate) -> str:
    """HTML for one result card."""
    parts = [
        '<div class="result-card">',
        f'<h3 class="result-word">{html_mod.escape(candidate.word)}</h3>',
        f'<p class="result-definition">{html_mod.escape(candidate.definition)}</p>',
    ]
    if candidate.distance > 0:
        parts.append(f'<span class="result-distance">Distance: {candidate.distance}</span>')
    parts.append("</div>")
    return "".join(parts)


def render_results(results: List[Candidate]) -> str:
    if not results:
        return ""
    cards = "\n".join(render_card(candidate) for candidate in results)
    return f'<div class="results-grid">\n{cards}\n</div>'


def render_page(response: LookupResponse) -> str:
    """Full search page for a lookup outcome."""
    message = html_mod.escape(response.message, quote=False)
    message_html = ""
    if message:
        css = "info-message error-message" if response.status == "not_found" else "info-message"
        message_html = f'<p class="{css}">{message}</p>'
    
    return PAGE.format(
        title=html_mod.escape(settings.app_name),
        query=html_mod.escape(response.query, quote=True),
        message=message_html,
        results=render_results(response.results),
    )


@router.get("/", response_class=HTMLResponse, summary="Search page")
def index(
    q: str = Query("", description="The word to look up"),
    engine: LookupEngine = Depends(get_engine),
    store: WordStore = Depends(get_store),
) -> HTMLResponse:
    """Render the search form and, when a query was submitted, its results."""
    query = q.strip()[:settings.max_query_length]
    response = engine.search(query, store)
    return HTMLResponse(render_page(response))


PAGE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
body {{ font-family: Georgia, "Times New Roman", serif; background: #faf8f2; color: #1c1208; margin: 0; }}
.header {{ background: #2b1a0d; color: #f5e8cc; padding: .8rem 1.6rem; }}
.main-content {{ max-width: 960px; margin: 0 auto; padding: 1.4rem; }}
.search-form {{ display: flex; gap: .5rem; }}
.search-input {{ flex: 1; font-size: 1.05rem; padding: .4rem .7rem; }}
.info-message {{ font-style: italic; }}
.error-message {{ color: #9a2020; }}
.results-grid {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); gap: 1rem; }}
.result-card {{ background: #fffef8; border: 1px solid #d4c8a8; border-radius: 4px; padding: .8rem 1rem; }}
.result-word {{ margin: 0 0 .4rem; color: #5a2800; }}
.result-distance {{ font-family: sans-serif; font-size: .75rem; color: #7a5030; }}
</style>
</head>
<body>
<header class="header"><h1 class="header-title">{title}</h1></header>
<main class="main-content">
<section class="search-section">
<form method="GET" action="/" class="search-form">
<input type="search" name="q" placeholder="Search for a word..." value="{query}"
       class="search-input" aria-label="Search term">
<button type="submit" class="search-button">Search</button>
</form>
</section>
<section class="results-section">
{message}
{results}
</section>
</main>
</body>
</html>
"""
