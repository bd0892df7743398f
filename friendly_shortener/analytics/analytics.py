"""
Analytics module for the Friendly URL Shortener.

Responsibilities:
    - Build the per-link dashboard rows (clicks, timestamps, status)
    - Provide summary statistics across all links

Click counts themselves live on the LinkRecords and are maintained by the
registry when a slug resolves; this module only reads them.

Row example:
    {
        "slug": "aZ3kQ9",
        "shortUrl": "http://localhost:8000/aZ3kQ9",
        "url": "https://example.com/page",
        "hostname": "example.com",
        "clicks": 3,
        "createdAt": "2025-01-01T12:00:00Z",
        "expiresAt": "2025-01-02T12:00:00Z",
        "status": "Active",
        "lastClicked": "2025-01-01T13:05:00Z"
    }
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..models import STATUS_EXPIRED, LinkRecord
from ..registry.link_registry import LinkRegistry


class LinkAnalytics:
    def __init__(self, registry: LinkRegistry, base_url: str):
        """
        Args:
            registry (LinkRegistry): Source of link records.
            base_url (str): Origin prepended to slugs to build short URLs.
        """
        self.registry = registry
        self.base_url = base_url.rstrip("/")

    def _now(self, now: Optional[datetime]) -> datetime:
        return now if now is not None else self.registry.clock()

    def row(self, record: LinkRecord, now: datetime) -> Dict[str, Any]:
        data = record.to_json_dict()
        return {
            "slug": record.slug,
            "shortUrl": f"{self.base_url}/{record.slug}",
            "url": record.url,
            "hostname": record.hostname,
            "clicks": record.clicks,
            "createdAt": data["createdAt"],
            "expiresAt": data["expiresAt"],
            "status": record.status(now),
            "lastClicked": data["lastClicked"],
        }

    def rows(self, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """One dashboard row per link, in insertion order."""
        current = self._now(now)
        return [self.row(record, current) for record in self.registry.list_links()]

    def summary(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Aggregate view of the dashboard.

        Returns:
            Dict[str, Any]:
                - total_links: int
                - total_clicks: int
                - active_links: int
                - expired_links: int
                - most_clicked: slug with the most clicks (first wins on ties),
                  or None when nothing has been clicked yet
        """
        current = self._now(now)
        records = self.registry.list_links()
        expired = sum(1 for r in records if r.status(current) == STATUS_EXPIRED)

        most_clicked = None
        best = 0
        for record in records:
            if record.clicks > best:
                best = record.clicks
                most_clicked = record.slug

        return {
            "total_links": len(records),
            "total_clicks": sum(r.clicks for r in records),
            "active_links": len(records) - expired,
            "expired_links": expired,
            "most_clicked": most_clicked,
        }
