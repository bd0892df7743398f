"""
Data model for the Friendly URL Shortener.

A `LinkRecord` is one shortened URL. Records are immutable pydantic models;
the registry replaces a record with an updated copy when a click is recorded.

Persisted layout (one key in the key-value store):

    [
        {
            "slug": "aZ3kQ9",
            "url": "https://example.com/page",
            "createdAt": "2025-01-01T12:00:00Z",
            "expiresAt": "2025-01-02T12:00:00Z",
            "clicks": 0,
            "lastClicked": null
        }
    ]
"""

from datetime import datetime
from typing import List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel

STATUS_ACTIVE = "Active"
STATUS_EXPIRED = "Expired"


class LinkRecord(BaseModel):
    """
    One shortened URL.

    Attributes:
        slug (str): Unique key; 6 Base62 characters when generated.
        url (str): Absolute target URL, validated at creation time.
        created_at (datetime): Set once at creation (UTC).
        expires_at (datetime): Always created_at + link lifetime (24h by default).
        clicks (int): Successful resolves so far; never decreases.
        last_clicked (Optional[datetime]): Time of the most recent resolve.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    slug: str
    url: str
    created_at: datetime
    expires_at: datetime
    clicks: int = 0
    last_clicked: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        """Expiry is display-only: expired links still resolve."""
        return self.expires_at < now

    def status(self, now: datetime) -> str:
        return STATUS_EXPIRED if self.is_expired(now) else STATUS_ACTIVE

    @property
    def hostname(self) -> str:
        return urlparse(self.url).hostname or ""

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class CreationResult(BaseModel):
    """What the creation view shows after a successful shorten."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    short_url: str
    slug: str
    url: str
    expires_at: datetime

    @classmethod
    def from_record(cls, record: LinkRecord, base_url: str) -> "CreationResult":
        return cls(
            short_url=f"{base_url.rstrip('/')}/{record.slug}",
            slug=record.slug,
            url=record.url,
            expires_at=record.expires_at,
        )

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# Codec for the whole persisted collection (ordered JSON array)
LinkCollection = TypeAdapter(List[LinkRecord])
