"""POST /api/generate-image endpoint"""
import logging

from fastapi import APIRouter, Depends

from launchgen_api.agents.client import OpenAIClient, openai_client
from launchgen_api.agents.image_prompt import create_hero_image_prompt
from launchgen_api.core.auth import require_user
from launchgen_api.models.errors import ValidationError
from launchgen_api.models.schemas import ErrorResponse, GenerateImageRequest, GenerateImageResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def get_image_client() -> OpenAIClient:
    return openai_client


@router.post(
    "/generate-image",
    response_model=GenerateImageResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_image(
    request: GenerateImageRequest,
    user_id: str = Depends(require_user),
    client: OpenAIClient = Depends(get_image_client),
):
    """Generate a hero background image from the page's headline; nothing is saved."""
    if not request.headline or not request.headline.strip():
        raise ValidationError("Headline is required.", field="headline")

    prompt = create_hero_image_prompt(request.headline, request.subheadline, request.businessName)
    logger.info(f"Hero image requested by user {user_id}")
    image_url = await client.generate_image(prompt)
    return GenerateImageResponse(imageUrl=image_url, prompt=prompt)
