"""Admin endpoints (API key protected)"""
import asyncio
import logging

from fastapi import APIRouter, Depends, Query

from launchgen_api.core.auth import require_admin_key
from launchgen_api.core.metrics import summarize_site_metrics
from launchgen_api.core.repository import PageRepository, get_repository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/admin/metrics", dependencies=[Depends(require_admin_key)])
async def site_metrics(
    range: str = Query("monthly", description="daily, weekly, monthly or yearly"),
    repository: PageRepository = Depends(get_repository),
):
    """Site-wide users, pages, leads and page views with growth and a per-period breakdown."""
    users, pages, leads, events = await asyncio.gather(
        asyncio.to_thread(repository.list_users),
        asyncio.to_thread(repository.list_pages),
        asyncio.to_thread(repository.list_leads),
        asyncio.to_thread(repository.list_events),
    )
    logger.info(
        f"Admin metrics | range={range} | users={len(users)} | pages={len(pages)} | "
        f"leads={len(leads)} | events={len(events)}"
    )
    return summarize_site_metrics(users, pages, leads, events, range)
