"""OpenAI SDK wrapper"""

import asyncio
import logging
from typing import Any, Dict, List, Optional
from openai import OpenAI
from launchgen_api.core.config import settings
from launchgen_api.models.errors import ApplicationError, ErrorCode, GenerationFailed, ImageGenerationFailed

logger = logging.getLogger(__name__)


class OpenAIClient:
    """
    Wrapper for the OpenAI chat completions and images APIs.

    The config generator sends one system + user message pair and gets raw
    text back; the hero image endpoint asks for one image URL.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, timeout: Optional[float] = None):
        api_key = api_key if api_key is not None else settings.openai_api_key
        self.model = model or settings.openai_model
        self.timeout = timeout or settings.openai_timeout_seconds
        if not api_key:
            logger.warning("OPENAI_API_KEY not set - page generation is disabled")
        self.client = OpenAI(api_key=api_key, timeout=self.timeout, max_retries=0) if api_key else None

    def _require_client(self) -> None:
        if self.client is None:
            raise ApplicationError(
                "OpenAI API key not configured. Please set OPENAI_API_KEY in .env file.",
                code=ErrorCode.CONFIGURATION_ERROR,
            )

    async def complete(
        self,
        messages: List[Dict[str, Any]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Send a chat completion request and return the message content.

        Args:
            messages: Chat messages (role/content dicts)
            temperature: Sampling temperature, defaults to settings
            max_tokens: Completion token limit, defaults to settings

        Returns:
            The raw text of the first choice

        Raises:
            ApplicationError: If the API key is not configured
            GenerationFailed: If the call errors, times out or returns no content
        """
        self._require_client()

        kwargs = {
            "model": self.model,
            "messages": messages,
            "temperature": settings.openai_temperature if temperature is None else temperature,
            "max_tokens": max_tokens or settings.openai_max_tokens,
        }

        try:
            logger.info(f"[OpenAI] Calling {self.model} | max_tokens={kwargs['max_tokens']} | timeout={self.timeout}s")
            response = await asyncio.wait_for(
                asyncio.to_thread(self.client.chat.completions.create, **kwargs),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise GenerationFailed(f"OpenAI request timed out after {self.timeout}s")
        except Exception as e:
            logger.error(f"[OpenAI] Call failed: {e!r}")
            raise GenerationFailed(f"OpenAI API call failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise GenerationFailed("No content returned from OpenAI")

        usage = getattr(response, "usage", None)
        logger.info(
            f"[OpenAI] ✓ Response received | "
            f"tokens: {usage.total_tokens if usage else 'n/a'} | "
            f"response_length: {len(content)} chars"
        )
        return content

    async def generate_image(self, prompt: str, size: Optional[str] = None) -> str:
        """
        Generate one image and return its hosted URL.

        Raises:
            ApplicationError: If the API key is not configured
            ImageGenerationFailed: If the call errors, times out or returns no image
        """
        self._require_client()
        kwargs = {
            "model": settings.openai_image_model,
            "prompt": prompt,
            "n": 1,
            "size": size or settings.openai_image_size,
            "quality": "standard",
            "style": "natural",
        }

        try:
            logger.info(f"[OpenAI] Generating image with {kwargs['model']} | size={kwargs['size']}")
            response = await asyncio.wait_for(
                asyncio.to_thread(self.client.images.generate, **kwargs),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise ImageGenerationFailed(f"OpenAI image request timed out after {self.timeout}s")
        except Exception as e:
            logger.error(f"[OpenAI] Image call failed: {e!r}")
            raise ImageGenerationFailed(str(e)) from e

        url = response.data[0].url if response.data else None
        if not url:
            raise ImageGenerationFailed("No image returned from OpenAI")
        logger.info("[OpenAI] ✓ Image generated")
        return url


# Global client instance
openai_client = OpenAIClient()
