"""Error models"""

from enum import Enum
from typing import Optional
import uuid


GENERATION_RETRY_HINT = (
    "This sometimes happens with the AI, but it can usually be fixed "
    "if you press the 'Generate' button 2-3 more times."
)


class ErrorCode(str, Enum):
    """Error codes"""
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_COLOR_FORMAT = "INVALID_COLOR_FORMAT"
    GENERATION_FAILED = "GENERATION_FAILED"
    STORAGE_ERROR = "STORAGE_ERROR"
    NOT_FOUND = "NOT_FOUND"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    CONFLICT = "CONFLICT"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class ApplicationError(Exception):
    """Application error carrying a code, a user-facing message and an optional hint"""
    code = ErrorCode.CONFIGURATION_ERROR

    def __init__(self, message: str, code: Optional[ErrorCode] = None, retryable: bool = False, hint: Optional[str] = None):
        self.error_id = str(uuid.uuid4())
        if code is not None:
            self.code = code
        self.message = message
        self.retryable = retryable
        self.hint = hint
        super().__init__(self.message)

    def model_dump(self):
        """Return dict representation for API responses"""
        return {
            "error": self.message,
            "error_id": self.error_id,
            "code": self.code.value,
            "hint": self.hint,
            "retryable": self.retryable,
        }

    @property
    def http_status(self) -> int:
        """Map error code to HTTP status"""
        mapping = {
            ErrorCode.MISSING_FIELD: 400,
            ErrorCode.INVALID_FIELD: 400,
            ErrorCode.INVALID_COLOR_FORMAT: 400,
            ErrorCode.NOT_AUTHENTICATED: 401,
            ErrorCode.NOT_AUTHORIZED: 403,
            ErrorCode.NOT_FOUND: 404,
            ErrorCode.CONFLICT: 409,
            ErrorCode.GENERATION_FAILED: 500,
            ErrorCode.STORAGE_ERROR: 500,
            ErrorCode.CONFIGURATION_ERROR: 500,
        }
        return mapping.get(self.code, 500)


class ValidationError(ApplicationError):
    """A mandatory field is missing or a field value is rejected"""
    code = ErrorCode.MISSING_FIELD

    def __init__(self, message: str, field: Optional[str] = None, code: Optional[ErrorCode] = None):
        super().__init__(message, code=code)
        self.field = field


class InvalidColorFormat(ApplicationError):
    code = ErrorCode.INVALID_COLOR_FORMAT


class GenerationFailed(ApplicationError):
    """The AI call errored or returned content that is not a usable page config.

    The message always tells the user to retry by hand; nothing retries here.
    """
    code = ErrorCode.GENERATION_FAILED

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(
            f"There was an error generating the landing page. {GENERATION_RETRY_HINT} "
            f"(Technical details: {detail})",
            retryable=True,
            hint="Press 'Generate' again.",
        )


class ImageGenerationFailed(ApplicationError):
    """The image API errored or returned no image; retrying by hand is expected"""
    code = ErrorCode.GENERATION_FAILED

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(
            f"Failed to generate image. Please try again. (Technical details: {detail})",
            retryable=True,
        )


class StorageError(ApplicationError):
    """Datastore operation failed; message is the backend's, unchanged"""
    code = ErrorCode.STORAGE_ERROR


class NotFoundError(ApplicationError):
    code = ErrorCode.NOT_FOUND


class AuthError(ApplicationError):
    code = ErrorCode.NOT_AUTHENTICATED


class ConflictError(ApplicationError):
    code = ErrorCode.CONFLICT
