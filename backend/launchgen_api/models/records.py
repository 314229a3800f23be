"""Stored row models"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict


class EventType(str, Enum):
    """Visitor interaction kinds"""
    PAGE_VIEW = "page_view"
    FORM_SUBMIT = "form_submit"
    CTA_CLICK = "cta_click"


class StoredRecord(BaseModel):
    """Rows may carry backend columns (id, timestamps) we don't model"""
    model_config = ConfigDict(extra="allow")


class AnalyticsEvent(StoredRecord):
    landing_page_id: str
    event_type: EventType
    session_id: Optional[str] = None
    referrer: Optional[str] = None
    utm_source: Optional[str] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    created_at: Optional[datetime] = None


class Lead(StoredRecord):
    page_id: str
    email: str
    name: Optional[str] = None
    source: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None


class LandingPage(StoredRecord):
    id: str
    owner_id: str
    title: Optional[str] = None
    slug: str
    template_id: Optional[str] = None
    page_content: Dict[str, Any]
    page_style: Optional[Dict[str, Any]] = None
    published: bool = False
    created_at: Optional[datetime] = None
