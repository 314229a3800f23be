"""Visitor interaction capture: analytics events and leads"""

import hashlib
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from launchgen_api.core.repository import PageRepository
from launchgen_api.models.errors import ErrorCode, ValidationError
from launchgen_api.models.records import AnalyticsEvent, EventType, Lead

logger = logging.getLogger(__name__)

# Event metadata stored as-is when present
EVENT_META_FIELDS = ("session_id", "referrer", "utm_source", "user_agent")


def hash_ip(ip: Optional[str]) -> Optional[str]:
    """SHA-256 hex digest of the IP string; None when there is no IP."""
    if not ip:
        return None
    return hashlib.sha256(ip.encode("utf-8")).hexdigest()


def client_ip(forwarded_for: Optional[str], remote_host: Optional[str]) -> Optional[str]:
    """Client IP from the first X-Forwarded-For hop, else the connection peer."""
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop
    return remote_host or None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def record_event(
    repository: PageRepository,
    landing_page_id: Optional[str],
    event_type: Optional[str],
    meta: Optional[Mapping[str, Any]] = None,
) -> AnalyticsEvent:
    """
    Store one visitor event against a page.

    Args:
        repository: Datastore access
        landing_page_id: Page the event belongs to (required)
        event_type: One of page_view, form_submit, cta_click (required)
        meta: Optional session_id, referrer, utm_source, user_agent and ip.
            The ip is hashed before storage and never kept raw.

    Returns:
        The stored event

    Raises:
        ValidationError: If a required field is missing or the event type is unknown
        StorageError: If the insert fails
    """
    if not landing_page_id or not event_type:
        raise ValidationError("Missing landing_page_id or event_type", field="landing_page_id" if not landing_page_id else "event_type")

    try:
        kind = EventType(event_type)
    except ValueError:
        raise ValidationError(
            f"Unknown event_type '{event_type}'. Expected one of: {', '.join(e.value for e in EventType)}",
            field="event_type",
            code=ErrorCode.INVALID_FIELD,
        )

    meta = meta or {}
    record: Dict[str, Any] = {
        "landing_page_id": landing_page_id,
        "event_type": kind.value,
        "ip_address": hash_ip(meta.get("ip")),
        "created_at": _utcnow().isoformat(),
    }
    for field in EVENT_META_FIELDS:
        record[field] = meta.get(field)

    stored = repository.insert_event(record)
    logger.debug(f"Recorded {kind.value} for page {landing_page_id}")
    return AnalyticsEvent.model_validate(stored)


def capture_lead(
    repository: PageRepository,
    page_id: Optional[str],
    email: Optional[str],
    name: Optional[str] = None,
    source: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Lead:
    """
    Store a lead submitted from a landing page form.

    Raises:
        ValidationError: If page_id or email is missing
        StorageError: If the insert fails; the backend message is kept unchanged
    """
    if not page_id or not email or not email.strip():
        raise ValidationError("page_id and email are required.", field="page_id" if not page_id else "email")

    stored = repository.insert_lead({
        "page_id": page_id,
        "name": name,
        "email": email.strip(),
        "source": source,
        "metadata": metadata,
        "created_at": _utcnow().isoformat(),
    })
    logger.info(f"Captured lead for page {page_id}")
    return Lead.model_validate(stored)
