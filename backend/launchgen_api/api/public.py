"""GET /page/{slug}: public rendering of published pages"""
import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from pydantic import ValidationError as SchemaValidationError

from launchgen_api.core.renderer import render_page
from launchgen_api.core.repository import PageRepository, get_repository
from launchgen_api.core.theme import resolve_theme
from launchgen_api.models.page_config import LandingPageConfig

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_HTML = '<div style="text-align:center;color:#ef4444;margin-top:4rem">Landing page not found.</div>'


def _not_found() -> HTMLResponse:
    return HTMLResponse(content=NOT_FOUND_HTML, status_code=404)


@router.get("/page/{slug}", response_class=HTMLResponse)
async def public_landing_page(
    slug: str,
    repository: PageRepository = Depends(get_repository),
):
    """Render a published page; unpublished, missing or broken pages all look like 404."""
    page = await asyncio.to_thread(repository.find_page_by_slug, slug)
    if not page:
        logger.info(f"No published page found for slug: {slug}")
        return _not_found()

    content = page.get("page_content")
    if not isinstance(content, dict):
        logger.error(f"Page content missing for slug: {slug}")
        return _not_found()

    style = page.get("page_style") or {}
    theme = resolve_theme(
        style.get("theme") or content.get("theme"),
        style.get("themeColors") or content.get("themeColors"),
    )
    content = {k: v for k, v in content.items() if k not in ("theme", "themeColors", "theme_colors")}

    try:
        config = LandingPageConfig.model_validate(content)
    except SchemaValidationError as e:
        logger.error(f"Stored config for slug {slug} is invalid: {e}")
        return _not_found()

    # Rows without an id render without tracking and the lead form
    page_id = str(page["id"]) if page.get("id") else None
    html = render_page(config, theme, style.get("sectionVisibility"), page_id=page_id)
    return HTMLResponse(
        content=html,
        headers={
            "Cache-Control": "public, max-age=60",
            "X-Content-Type-Options": "nosniff",
        },
    )
