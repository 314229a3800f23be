"""
Tests for the per-page and site-wide analytics summaries
"""
from datetime import datetime, timezone

import pytest

from launchgen_api.core.metrics import period_start, summarize_page_analytics, summarize_site_metrics
from launchgen_api.models.errors import ErrorCode, ValidationError

# A Wednesday
NOW = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)


def _event(event_type, session_id=None, referrer=None, utm_source=None):
    return {"event_type": event_type, "session_id": session_id, "referrer": referrer, "utm_source": utm_source}


def test_summary_counts_and_conversion():
    events = [
        _event("page_view", "s1", "https://google.com", "newsletter"),
        _event("page_view", "s2", "https://google.com"),
        _event("page_view", "s2", "https://x.com"),
        _event("cta_click", "s1"),
        _event("form_submit", "s1"),
    ]
    leads = [{"email": "a@b.co"}]

    summary = summarize_page_analytics(events, leads)

    assert summary["page_views"] == 3
    assert summary["unique_sessions"] == 2
    assert summary["cta_clicks"] == 1
    assert summary["form_submits"] == 1
    assert summary["leads"] == 1
    assert summary["conversion_rate"] == 33.3
    assert summary["top_referrers"][0] == {"name": "https://google.com", "count": 2}
    assert summary["top_utm_sources"] == [{"name": "newsletter", "count": 1}]


def test_summary_without_views():
    summary = summarize_page_analytics([], [{"email": "a@b.co"}])
    assert summary["page_views"] == 0
    assert summary["conversion_rate"] == 0.0
    assert summary["top_referrers"] == []


def test_top_referrers_limited_to_five():
    events = [_event("page_view", referrer=f"https://site{i}.com") for i in range(8)]
    assert len(summarize_page_analytics(events, [])["top_referrers"]) == 5


class TestSiteMetrics:

    @pytest.fixture
    def rows(self):
        users = [
            {"id": "u1", "created_at": "2024-03-05T09:00:00Z"},
            {"id": "u2", "created_at": "2024-03-19T09:00:00+00:00"},
            {"id": "u3", "created_at": "2024-02-10T09:00:00Z"},
            {"id": "u4", "created_at": "2023-12-01T09:00:00Z"},
            {"id": "u5"},
        ]
        pages = [
            {"id": "p1", "created_at": "2024-03-10T08:00:00Z"},
            {"id": "p2", "created_at": "2024-02-01T00:00:00Z"},
        ]
        leads = [{"id": "l1", "created_at": "2024-03-20T11:00:00Z"}]
        events = [
            {"event_type": "page_view", "created_at": "2024-03-20T10:00:00Z"},
            # Naive timestamps are read as UTC
            {"event_type": "page_view", "created_at": "2024-02-15T10:00:00"},
            {"event_type": "cta_click", "created_at": "2024-03-20T10:05:00Z"},
        ]
        return users, pages, leads, events

    def test_monthly_totals_and_rates(self, rows):
        metrics = summarize_site_metrics(*rows, range_name="monthly", now=NOW)

        assert metrics["total_users"] == 5
        assert metrics["active_users"] == 5
        assert metrics["total_pages"] == 2
        assert metrics["pages_this_period"] == 1
        assert metrics["total_leads"] == 1
        assert metrics["leads_this_period"] == 1
        assert metrics["page_views"] == 2
        assert metrics["page_views_this_period"] == 1
        assert metrics["conversion_rate"] == 50.0
        # Two new users in March against one in February
        assert metrics["growth_rate"] == 100.0

    def test_monthly_breakdown_windows_end_now(self, rows):
        breakdown = summarize_site_metrics(*rows, range_name="monthly", now=NOW)["breakdown"]

        assert len(breakdown) == 12
        assert breakdown[-1] == {"period": "2024-02-19", "users": 2, "pages": 1, "leads": 1, "page_views": 1}
        assert breakdown[-2] == {"period": "2024-01-20", "users": 1, "pages": 1, "leads": 0, "page_views": 1}
        assert breakdown[0]["period"] < breakdown[-1]["period"]

    def test_weekly_periods_start_on_monday(self):
        users = [
            {"created_at": "2024-03-18T00:00:00Z"},
            {"created_at": "2024-03-17T23:59:00Z"},
        ]
        metrics = summarize_site_metrics(users, [], [], [], range_name="weekly", now=NOW)

        assert metrics["growth_rate"] == 0.0
        assert len(metrics["breakdown"]) == 12

    @pytest.mark.parametrize("range_name,periods", [("daily", 7), ("yearly", 5)])
    def test_breakdown_lengths(self, range_name, periods):
        metrics = summarize_site_metrics([], [], [], [], range_name=range_name, now=NOW)
        assert len(metrics["breakdown"]) == periods
        assert metrics["conversion_rate"] == 0.0
        assert metrics["growth_rate"] == 0.0

    def test_unknown_range_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            summarize_site_metrics([], [], [], [], range_name="hourly", now=NOW)
        assert exc_info.value.code == ErrorCode.INVALID_FIELD

    def test_unreadable_timestamps_only_count_in_totals(self):
        metrics = summarize_site_metrics([{"created_at": "yesterday"}], [], [], [], now=NOW)
        assert metrics["total_users"] == 1
        assert all(b["users"] == 0 for b in metrics["breakdown"])


@pytest.mark.parametrize("range_name,expected", [
    ("daily", datetime(2024, 3, 20, tzinfo=timezone.utc)),
    ("weekly", datetime(2024, 3, 18, tzinfo=timezone.utc)),
    ("monthly", datetime(2024, 3, 1, tzinfo=timezone.utc)),
    ("yearly", datetime(2024, 1, 1, tzinfo=timezone.utc)),
])
def test_period_start(range_name, expected):
    assert period_start(NOW, range_name) == expected
