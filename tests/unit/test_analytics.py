"""
Unit tests for LinkAnalytics (dashboard rows and summary).
"""

import pytest

from friendly_shortener.analytics.analytics import LinkAnalytics


@pytest.fixture
def analytics(registry):
    return LinkAnalytics(registry, "http://short.test/")


def test_rows_empty(analytics):
    assert analytics.rows() == []


def test_row_fields(registry, resolver, analytics, clock):
    registry.create("https://www.example.com/deep/page?x=1", "abc123")
    clock.advance(minutes=10)
    resolver.resolve("abc123")
    (row,) = analytics.rows()
    assert row["slug"] == "abc123"
    assert row["shortUrl"] == "http://short.test/abc123"
    assert row["url"] == "https://www.example.com/deep/page?x=1"
    assert row["hostname"] == "www.example.com"
    assert row["clicks"] == 1
    assert row["status"] == "Active"
    assert row["createdAt"].startswith("2025-01-01T12:00:00")
    assert row["expiresAt"].startswith("2025-01-02T12:00:00")
    assert row["lastClicked"].startswith("2025-01-01T12:10:00")


def test_never_clicked_has_null_last_clicked(registry, analytics):
    registry.create("https://example.com", "fresh")
    assert analytics.rows()[0]["lastClicked"] is None


def test_status_flips_to_expired_after_ttl(registry, analytics, clock):
    registry.create("https://example.com", "ttl")
    clock.advance(hours=24)
    assert analytics.rows()[0]["status"] == "Active"  # expiresAt == now is not yet expired
    clock.advance(seconds=1)
    assert analytics.rows()[0]["status"] == "Expired"


def test_expired_rows_stay_listed(registry, analytics, clock):
    registry.create("https://a.com", "a")
    clock.advance(days=3)
    registry.create("https://b.com", "b")
    statuses = {row["slug"]: row["status"] for row in analytics.rows()}
    assert statuses == {"a": "Expired", "b": "Active"}


def test_summary(registry, resolver, analytics, clock):
    registry.create("https://a.com", "a")
    registry.create("https://b.com", "b")
    resolver.resolve("b")
    resolver.resolve("b")
    resolver.resolve("a")
    clock.advance(days=2)
    registry.create("https://c.com", "c")
    assert analytics.summary() == {
        "total_links": 3,
        "total_clicks": 3,
        "active_links": 1,
        "expired_links": 2,
        "most_clicked": "b",
    }


def test_summary_empty(analytics):
    assert analytics.summary() == {
        "total_links": 0,
        "total_clicks": 0,
        "active_links": 0,
        "expired_links": 0,
        "most_clicked": None,
    }
