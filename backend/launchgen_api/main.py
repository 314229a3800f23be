"""LaunchGen API application: routers, logging and error rendering"""

import logging
import sys
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from launchgen_api.core.config import settings
from launchgen_api.api import admin, events, generate, highlights, images, pages, public
from launchgen_api.models.errors import ApplicationError

# Log to stdout at the configured level; force replaces handlers uvicorn may have set
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True,
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)

# Application
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

# The editor frontend calls the API from another origin with session cookies
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError):
    """Render every ApplicationError as a JSON error body with its mapped status"""
    status = exc.http_status
    if status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: [{exc.code.value}] {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: [{exc.code.value}] {exc.message}")
    return JSONResponse(status_code=status, content=exc.model_dump())


@app.on_event("startup")
async def startup_event():
    """Log startup diagnostic information"""
    logger.info("=" * 60)
    logger.info("LAUNCHGEN API STARTING")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"OpenAI model: {settings.openai_model} (key configured: {bool(settings.openai_api_key)})")
    logger.info(f"Supabase configured: {bool(settings.supabase_url)}")
    logger.info("=" * 60)


@app.get("/")
async def root():
    """Service banner"""
    return {"service": settings.api_title, "version": settings.api_version, "status": "healthy"}


@app.get("/health")
async def health():
    """Liveness probe; does not touch Supabase or OpenAI"""
    return {"status": "healthy", "environment": settings.environment}


# JSON API under /api; public pages at the root
app.include_router(generate.router, prefix="/api", tags=["generate"])
app.include_router(images.router, prefix="/api", tags=["generate"])
app.include_router(highlights.router, prefix="/api", tags=["highlights"])
app.include_router(pages.router, prefix="/api", tags=["landing-pages"])
app.include_router(events.router, prefix="/api", tags=["events"])
app.include_router(admin.router, prefix="/api", tags=["admin"])
app.include_router(public.router, tags=["public"])
