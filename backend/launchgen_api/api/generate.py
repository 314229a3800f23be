"""POST /api/generate-page endpoint"""
import logging

from fastapi import APIRouter, Depends

from launchgen_api.agents.generator import ConfigGenerator
from launchgen_api.core.auth import require_user
from launchgen_api.models.schemas import ErrorResponse, GenerateRequest, GenerateResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def get_generator() -> ConfigGenerator:
    return ConfigGenerator()


@router.post(
    "/generate-page",
    response_model=GenerateResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_page(
    request: GenerateRequest,
    user_id: str = Depends(require_user),
    generator: ConfigGenerator = Depends(get_generator),
):
    """
    Generate a landing page config from a prompt.

    Passing existingConfig regenerates an existing page. Nothing is saved
    here; the client saves the config through /api/landing-pages.
    """
    logger.info(f"Generation requested by user {user_id} | regeneration={bool(request.existingConfig)}")
    config = await generator.generate(request.prompt, request.existingConfig)
    return GenerateResponse(config=config)
