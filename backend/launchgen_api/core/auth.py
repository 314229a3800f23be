"""Session gate for owner-only endpoints and the admin key check"""

import asyncio
import logging
import secrets
from typing import Optional

from fastapi import Request, Security
from fastapi.security import APIKeyCookie, APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from supabase import AuthApiError

from launchgen_api.core.config import settings
from launchgen_api.core.repository import get_supabase_client
from launchgen_api.models.errors import ApplicationError, AuthError, ErrorCode, StorageError

logger = logging.getLogger(__name__)

# Supabase stores the access token in this cookie for browser sessions
SESSION_COOKIE_NAME = "sb-access-token"

bearer_scheme = HTTPBearer(auto_error=False)
session_cookie = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)
admin_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def resolve_user_id(access_token: str) -> Optional[str]:
    """
    Ask Supabase auth who owns an access token.

    Returns:
        The user id, or None if the token is invalid or expired

    Raises:
        ApplicationError: If Supabase is not configured
        StorageError: If Supabase auth cannot be reached
    """
    client = get_supabase_client()
    try:
        response = client.auth.get_user(access_token)
    except AuthApiError as e:
        logger.info(f"Rejected session token: {e}")
        return None
    except Exception as e:
        logger.error(f"Session lookup failed: {e!r}")
        raise StorageError(f"Could not verify the session: {e}") from e
    user = getattr(response, "user", None)
    return getattr(user, "id", None)


async def require_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    cookie_token: Optional[str] = Security(session_cookie),
) -> str:
    """
    Current authenticated user id.

    Raises:
        AuthError: If no valid session token is present
    """
    token = credentials.credentials if credentials else cookie_token
    if not token:
        logger.info(f"Unauthenticated request to {request.url.path}")
        raise AuthError("Not authenticated.")

    user_id = await asyncio.to_thread(resolve_user_id, token)
    if not user_id:
        raise AuthError("Not authenticated.")
    return user_id


async def require_admin_key(api_key: Optional[str] = Security(admin_key_header)) -> str:
    """
    Verify the admin API key from the X-API-Key header.

    Raises:
        ApplicationError: If ADMIN_API_KEY is not configured
        AuthError: If the header is missing or does not match
    """
    if not settings.admin_api_key:
        logger.warning("ADMIN_API_KEY not configured - admin endpoints are disabled")
        raise ApplicationError(
            "Admin API key not configured. Please set ADMIN_API_KEY in .env file.",
            code=ErrorCode.CONFIGURATION_ERROR,
        )

    if not api_key:
        logger.warning("Admin request missing X-API-Key header")
        raise AuthError("Missing API key. Please provide X-API-Key header.", code=ErrorCode.NOT_AUTHORIZED)

    if not secrets.compare_digest(api_key.encode("utf-8"), settings.admin_api_key.encode("utf-8")):
        logger.warning(f"Invalid admin API key attempt: {api_key[:8]}...")
        raise AuthError("Invalid API key", code=ErrorCode.NOT_AUTHORIZED)

    return api_key
