"""Analytics summaries: one page for its owner, the whole site for admins"""

from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import TypeAdapter, ValidationError as SchemaValidationError

from launchgen_api.models.errors import ErrorCode, ValidationError

TOP_SOURCES_LIMIT = 5

# Length of one reporting period and how many periods the breakdown shows
PERIOD_DURATIONS = {
    "daily": timedelta(days=1),
    "weekly": timedelta(days=7),
    "monthly": timedelta(days=30),
    "yearly": timedelta(days=365),
}
BREAKDOWN_PERIODS = {"daily": 7, "weekly": 12, "monthly": 12, "yearly": 5}

_datetime_adapter = TypeAdapter(datetime)


def _top(values: Iterable[Any]) -> List[Dict[str, Any]]:
    counts = Counter(v for v in values if v)
    return [{"name": name, "count": count} for name, count in counts.most_common(TOP_SOURCES_LIMIT)]


def summarize_page_analytics(events: List[Mapping[str, Any]], leads: List[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Aggregate raw event and lead rows for one page.

    Conversion rate is leads per page view, in percent with one decimal.
    """
    by_type = Counter(e.get("event_type") for e in events)
    views = by_type.get("page_view", 0)
    lead_count = len(leads)

    return {
        "page_views": views,
        "unique_sessions": len({e.get("session_id") for e in events if e.get("session_id")}),
        "form_submits": by_type.get("form_submit", 0),
        "cta_clicks": by_type.get("cta_click", 0),
        "leads": lead_count,
        "conversion_rate": round(lead_count / views * 100, 1) if views else 0.0,
        "top_referrers": _top(e.get("referrer") for e in events),
        "top_utm_sources": _top(e.get("utm_source") for e in events),
    }


def _created_at(row: Mapping[str, Any]) -> Optional[datetime]:
    """Row timestamp as an aware UTC datetime; None when missing or unreadable."""
    value = row.get("created_at")
    if not value:
        return None
    try:
        parsed = _datetime_adapter.validate_python(value)
    except SchemaValidationError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def period_start(moment: datetime, range_name: str) -> datetime:
    """Start of the calendar period containing ``moment``: midnight, Monday, the 1st or Jan 1."""
    start = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    if range_name == "weekly":
        return start - timedelta(days=start.weekday())
    if range_name == "monthly":
        return start.replace(day=1)
    if range_name == "yearly":
        return start.replace(month=1, day=1)
    return start


def _count_between(stamps: List[Optional[datetime]], start: datetime, end: Optional[datetime] = None) -> int:
    return sum(1 for s in stamps if s is not None and s >= start and (end is None or s < end))


def summarize_site_metrics(
    users: List[Mapping[str, Any]],
    pages: List[Mapping[str, Any]],
    leads: List[Mapping[str, Any]],
    events: List[Mapping[str, Any]],
    range_name: str = "monthly",
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Site-wide totals, current-period counts, user growth and a per-period breakdown.

    Args:
        users, pages, leads, events: Raw rows; only ``created_at`` (and
            ``event_type`` for events) is read
        range_name: daily, weekly, monthly or yearly
        now: Reference time, defaults to the current UTC time

    Returns:
        Counts plus ``growth_rate`` (new users against the previous period) and
        ``conversion_rate`` (all leads per page view), both percentages with one
        decimal. ``breakdown`` lists consecutive windows of one period length,
        oldest first, the last one ending at ``now``.

    Raises:
        ValidationError: If range_name is not a known range
    """
    if range_name not in PERIOD_DURATIONS:
        raise ValidationError(
            f"Invalid range: {range_name!r}. Expected one of: {', '.join(PERIOD_DURATIONS)}.",
            field="range",
            code=ErrorCode.INVALID_FIELD,
        )

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    duration = PERIOD_DURATIONS[range_name]
    current_start = period_start(now, range_name)
    # The calendar period just before the current one
    previous_start = period_start(current_start - timedelta(days=1), range_name)

    user_stamps = [_created_at(u) for u in users]
    page_stamps = [_created_at(p) for p in pages]
    lead_stamps = [_created_at(l) for l in leads]
    view_stamps = [_created_at(e) for e in events if e.get("event_type") == "page_view"]

    users_now = _count_between(user_stamps, current_start)
    users_before = _count_between(user_stamps, previous_start, current_start)
    growth_rate = (users_now - users_before) / users_before * 100 if users_before else 0.0

    page_views = len(view_stamps)
    conversion_rate = len(leads) / page_views * 100 if page_views else 0.0

    breakdown = []
    for i in range(BREAKDOWN_PERIODS[range_name] - 1, -1, -1):
        end = now - duration * i
        start = end - duration
        breakdown.append({
            "period": start.date().isoformat(),
            "users": _count_between(user_stamps, start, end),
            "pages": _count_between(page_stamps, start, end),
            "leads": _count_between(lead_stamps, start, end),
            "page_views": _count_between(view_stamps, start, end),
        })

    return {
        "range": range_name,
        "total_users": len(users),
        # Sign-ins are not tracked, so every user counts as active
        "active_users": len(users),
        "total_pages": len(pages),
        "pages_this_period": _count_between(page_stamps, current_start),
        "total_leads": len(leads),
        "leads_this_period": _count_between(lead_stamps, current_start),
        "page_views": page_views,
        "page_views_this_period": _count_between(view_stamps, current_start),
        "conversion_rate": round(conversion_rate, 1),
        "growth_rate": round(growth_rate, 1),
        "breakdown": breakdown,
    }
