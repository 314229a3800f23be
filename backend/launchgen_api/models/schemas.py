"""API request/response schemas"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from launchgen_api.models.page_config import LandingPageConfig


class GenerateRequest(BaseModel):
    """POST /api/generate-page request"""
    prompt: Optional[str] = Field(None, description="Natural language description of the product")
    existingConfig: Optional[Dict[str, Any]] = Field(None, description="Current config when regenerating")


class GenerateResponse(BaseModel):
    success: bool = True
    config: LandingPageConfig


class SavePageRequest(BaseModel):
    """POST/PATCH /api/landing-pages request"""
    id: Optional[str] = None
    template_id: Optional[str] = None
    page_content: Optional[Dict[str, Any]] = None
    page_style: Optional[Dict[str, Any]] = None
    published: Optional[bool] = None


class DeletePageRequest(BaseModel):
    id: Optional[str] = None


class UpdateUrlRequest(BaseModel):
    """POST /api/landing-pages/update-url request"""
    pageId: Optional[str] = None
    newSlug: Optional[str] = None


class EventRequest(BaseModel):
    """POST /api/analytics request; fields are optional so missing ones get our own error"""
    landing_page_id: Optional[str] = None
    event_type: Optional[str] = None
    session_id: Optional[str] = None
    referrer: Optional[str] = None
    utm_source: Optional[str] = None


class LeadRequest(BaseModel):
    """POST /api/capture-lead request"""
    page_id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    source: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class SuggestHighlightsRequest(BaseModel):
    text: str


class ToggleHighlightRequest(BaseModel):
    word: str
    highlights: List[str] = []
    text: Optional[str] = Field(None, description="Headline; when given, stale highlights are dropped")


class HighlightsResponse(BaseModel):
    highlights: List[str]


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
    error_id: Optional[str] = None
    code: Optional[str] = None
    hint: Optional[str] = None
    retryable: bool = False


class GenerateImageRequest(BaseModel):
    """POST /api/generate-image request"""
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    businessName: Optional[str] = None


class GenerateImageResponse(BaseModel):
    success: bool = True
    imageUrl: str
    prompt: str
