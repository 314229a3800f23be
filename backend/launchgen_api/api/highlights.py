"""Highlight editing helpers for the page editor"""
from fastapi import APIRouter

from launchgen_api.core.highlights import cleanup_highlights, suggest_highlights, toggle_highlight
from launchgen_api.models.schemas import HighlightsResponse, SuggestHighlightsRequest, ToggleHighlightRequest

router = APIRouter()


@router.post("/highlights/suggest", response_model=HighlightsResponse)
async def suggest(request: SuggestHighlightsRequest):
    return HighlightsResponse(highlights=suggest_highlights(request.text))


@router.post("/highlights/toggle", response_model=HighlightsResponse)
async def toggle(request: ToggleHighlightRequest):
    """Toggle one word; with the headline text given, drop highlights no longer in it."""
    highlights = toggle_highlight(request.word, request.highlights)
    if request.text is not None:
        highlights = cleanup_highlights(highlights, request.text)
    return HighlightsResponse(highlights=highlights)
