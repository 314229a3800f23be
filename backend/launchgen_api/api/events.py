"""Visitor event and lead capture endpoints (public)"""
import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from launchgen_api.core.capture import capture_lead, client_ip, record_event
from launchgen_api.core.repository import PageRepository, get_repository
from launchgen_api.models.schemas import EventRequest, LeadRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/analytics")
async def receive_event(
    event: EventRequest,
    request: Request,
    repository: PageRepository = Depends(get_repository),
):
    """
    Record a page_view, form_submit or cta_click for a landing page.

    The client IP is taken from X-Forwarded-For (first hop) or the
    connection and is stored only as a hash.
    """
    meta = {
        "session_id": event.session_id,
        "referrer": event.referrer,
        "utm_source": event.utm_source,
        "user_agent": request.headers.get("user-agent", ""),
        "ip": client_ip(
            request.headers.get("x-forwarded-for"),
            request.client.host if request.client else None,
        ),
    }
    await asyncio.to_thread(record_event, repository, event.landing_page_id, event.event_type, meta)
    return {"success": True}


@router.post("/capture-lead")
async def receive_lead(
    lead: LeadRequest,
    repository: PageRepository = Depends(get_repository),
):
    stored = await asyncio.to_thread(
        capture_lead,
        repository,
        lead.page_id,
        lead.email,
        lead.name,
        lead.source,
        lead.metadata,
    )
    return {"lead": stored.model_dump(mode="json")}
