"""Public URL slugs"""

import re
import secrets
import string

SLUG_MAX_BASE_LENGTH = 32
SLUG_SUFFIX_LENGTH = 6

_SLUG_RE = re.compile(r"^[a-zA-Z0-9\-_]+$")
_BASE36 = string.digits + string.ascii_lowercase


def make_slug(title: str) -> str:
    """
    Build a URL slug from a page title plus a random suffix.

    "Ship Faster!" -> "ship-faster-k3x9a2"
    """
    base = re.sub(r"[^a-z0-9]+", "-", (title or "").lower()).strip("-")[:SLUG_MAX_BASE_LENGTH].rstrip("-")
    suffix = "".join(secrets.choice(_BASE36) for _ in range(SLUG_SUFFIX_LENGTH))
    return f"{base}-{suffix}" if base else suffix


def is_valid_slug(slug: str) -> bool:
    """Letters, digits, hyphens and underscores only."""
    return bool(slug) and bool(_SLUG_RE.match(slug))
