"""Landing page management endpoints (owner only)"""
import asyncio
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import ValidationError as SchemaValidationError

from launchgen_api.core.auth import require_user
from launchgen_api.core.metrics import summarize_page_analytics
from launchgen_api.core.repository import PageRepository, get_repository
from launchgen_api.core.theme import resolve_theme
from launchgen_api.models.errors import AuthError, ConflictError, ErrorCode, NotFoundError, ValidationError
from launchgen_api.models.page_config import LandingPageConfig, PageStyle
from launchgen_api.models.records import LandingPage
from launchgen_api.models.schemas import DeletePageRequest, SavePageRequest, UpdateUrlRequest
from launchgen_api.utils.slugs import is_valid_slug, make_slug

router = APIRouter()
logger = logging.getLogger(__name__)


# Loads a page and checks the caller owns it; raises NotFoundError / AuthError otherwise.
async def _get_owned_page(repository: PageRepository, page_id: str, user_id: str) -> Dict[str, Any]:
    page = await asyncio.to_thread(repository.find_page_by_id, page_id)
    if not page:
        raise NotFoundError("Landing page not found.")
    if page.get("owner_id") != user_id:
        logger.warning(f"User {user_id} denied access to page {page_id}")
        raise AuthError("Not authorized.", code=ErrorCode.NOT_AUTHORIZED)
    return page


# Resolves the single canonical theme from page_style (preferred) or page_content,
# and writes it into both so legacy themeColors never survive a save.
def _normalize_theme(page_content: Dict[str, Any], page_style: Dict[str, Any]):
    theme = resolve_theme(
        page_style.get("theme") or page_content.get("theme"),
        page_style.get("themeColors") or page_content.get("themeColors"),
    ).model_dump()
    content = {k: v for k, v in page_content.items() if k not in ("themeColors", "theme_colors")}
    style = {k: v for k, v in page_style.items() if k != "themeColors"}
    content["theme"] = theme
    style["theme"] = theme
    return content, style


@router.post("/landing-pages")
@router.patch("/landing-pages")
async def save_landing_page(
    request: SavePageRequest,
    user_id: str = Depends(require_user),
    repository: PageRepository = Depends(get_repository),
):
    """
    Create a landing page, or update it when an id is given.

    New pages get a slug derived from the headline; updates keep theirs.
    """
    if not isinstance(request.page_content, dict):
        raise ValidationError("page_content is required.", field="page_content")
    if not isinstance(request.page_style, dict):
        raise ValidationError("page_style is required.", field="page_style")

    page_content, page_style = _normalize_theme(request.page_content, request.page_style)
    try:
        config = LandingPageConfig.model_validate(page_content)
    except SchemaValidationError as e:
        raise ValidationError(
            f"page_content is not a valid landing page config: {e.errors()[0]['msg']}",
            field="page_content",
            code=ErrorCode.INVALID_FIELD,
        )
    try:
        PageStyle.model_validate(page_style)
    except SchemaValidationError as e:
        raise ValidationError(
            f"page_style is not valid: {e.errors()[0]['msg']}",
            field="page_style",
            code=ErrorCode.INVALID_FIELD,
        )

    title = config.hero.headline or "Untitled"
    record: Dict[str, Any] = {
        "title": title,
        "owner_id": user_id,
        "template_id": request.template_id or "default",
        "page_content": page_content,
        "page_style": page_style,
    }

    if request.id:
        existing = await asyncio.to_thread(repository.find_page_by_id, request.id)
        if not existing or not existing.get("slug"):
            raise ValidationError("Could not find existing landing page to update.", field="id", code=ErrorCode.INVALID_FIELD)
        if existing.get("owner_id") != user_id:
            raise AuthError("Not authorized.", code=ErrorCode.NOT_AUTHORIZED)
        record["id"] = request.id
        record["slug"] = existing["slug"]
        if request.published is not None:
            record["published"] = request.published
    else:
        record["slug"] = make_slug(title)
        record["published"] = True if request.published is None else request.published

    page = await asyncio.to_thread(repository.save_page, record)
    logger.info(f"Saved landing page {page.get('id')} (slug={page.get('slug')}) for user {user_id}")
    return {"page": LandingPage.model_validate(page).model_dump(mode="json")}


@router.delete("/landing-pages")
async def delete_landing_page(
    request: DeletePageRequest,
    user_id: str = Depends(require_user),
    repository: PageRepository = Depends(get_repository),
):
    if not request.id:
        raise ValidationError("Missing landing page id.", field="id")
    await _get_owned_page(repository, request.id, user_id)
    await asyncio.to_thread(repository.delete_page, request.id)
    logger.info(f"Deleted landing page {request.id}")
    return {"success": True}


@router.post("/landing-pages/update-url")
async def update_page_url(
    request: UpdateUrlRequest,
    user_id: str = Depends(require_user),
    repository: PageRepository = Depends(get_repository),
):
    """Change a page's public slug; slugs are unique across all pages."""
    if not request.pageId or not request.newSlug:
        raise ValidationError("Page ID and new slug are required", field="pageId" if not request.pageId else "newSlug")

    if not is_valid_slug(request.newSlug):
        raise ValidationError(
            "Invalid URL format. Only letters, numbers, hyphens, and underscores are allowed.",
            field="newSlug",
            code=ErrorCode.INVALID_FIELD,
        )

    page = await asyncio.to_thread(repository.find_page_by_id, request.pageId)
    if not page or page.get("owner_id") != user_id:
        raise NotFoundError("Page not found or access denied")

    if page.get("slug") == request.newSlug:
        return {"success": True, "slug": request.newSlug}

    taken = await asyncio.to_thread(repository.find_page_by_slug, request.newSlug, False)
    if taken:
        raise ConflictError("This URL is already taken. Please choose a different one.")

    await asyncio.to_thread(repository.update_page, request.pageId, {"slug": request.newSlug})
    logger.info(f"Page {request.pageId} slug changed to {request.newSlug}")
    return {"success": True, "slug": request.newSlug}


@router.get("/landing-pages/{page_id}/analytics")
async def page_analytics(
    page_id: str,
    user_id: str = Depends(require_user),
    repository: PageRepository = Depends(get_repository),
):
    """Views, clicks, leads and conversion rate for one owned page."""
    await _get_owned_page(repository, page_id, user_id)
    events, leads = await asyncio.gather(
        asyncio.to_thread(repository.list_events, page_id),
        asyncio.to_thread(repository.list_leads, page_id),
    )
    return {"page_id": page_id, **summarize_page_analytics(events, leads)}
