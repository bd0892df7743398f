"""
LinkRegistry module for the Friendly URL Shortener.

Responsibilities:
    - Validate submitted URLs
    - Resolve slugs (custom when given, random Base62 otherwise)
    - Ensure slug uniqueness within the collection
    - Record clicks (count and last-clicked timestamp)
    - List and delete links

Design notes:
    - The registry is the sole owner of consistency for the link collection.
      It is constructed once and injected into the creation and redirect
      surfaces instead of living in ambient global storage.
    - The whole collection is one ordered JSON array under one fixed key in a
      key-value store; every operation is a synchronous read/modify/write of
      that array. Concurrent writers follow last-writer-wins.
    - Records are immutable; a click replaces the record with an updated copy.
    - Expiry is informational. Nothing here purges or refuses expired links.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional
from urllib.parse import urlparse

from pydantic import ValidationError

from ..config import settings
from ..errors import DuplicateSlugError, InvalidURLError, StorageError
from ..models import LinkCollection, LinkRecord
from ..storage.base import BaseStore
from .strategies import BaseSlugStrategy, RandomSlugStrategy

logger = logging.getLogger(__name__)

SchemePattern = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
# Schemes whose URLs are meaningless without a host
HostSchemes = frozenset({"http", "https", "ftp", "ws", "wss"})

LINK_LIFETIME = timedelta(hours=24)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_absolute_url(url: str) -> bool:
    """
    Return True if `url` parses as an absolute URL.

    Rules:
        - a scheme matching [A-Za-z][A-Za-z0-9+.-]* followed by ":" and a
          non-empty remainder ("mailto:someone@example.com" is fine)
        - http/https/ftp/ws/wss additionally need a host
        - no whitespace in the authority part, and a numeric port if one is given
    """
    if not url or not url.strip():
        return False
    try:
        parsed = urlparse(url)
        if not parsed.scheme or not SchemePattern.match(parsed.scheme):
            return False
        if not url[len(parsed.scheme) + 1:]:
            return False
        if parsed.scheme.lower() in HostSchemes and not parsed.hostname:
            return False
        if any(ch.isspace() for ch in parsed.netloc):
            return False
        parsed.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError:
        return False
    return True


class LinkRegistry:
    """
    Owns the collection of LinkRecords stored under one key.

    Args:
        store (BaseStore): Key-value backend holding the collection.
        slug_strategy (Optional[BaseSlugStrategy]): Slug generator; 6-character
            random Base62 when omitted.
        clock (Optional[Callable[[], datetime]]): Source of "now"; UTC wall clock by default.
        storage_key (Optional[str]): Key for the collection; `settings.STORAGE_KEY` by default.
    """

    def __init__(
        self,
        store: BaseStore,
        slug_strategy: Optional[BaseSlugStrategy] = None,
        clock: Optional[Clock] = None,
        storage_key: Optional[str] = None,
    ):
        self.store = store
        self.slug_strategy = slug_strategy or RandomSlugStrategy()
        self.clock = clock or utcnow
        self.storage_key = storage_key or settings.STORAGE_KEY

    # ---------------------------------------------------------------------
    # Persistence helpers
    # ---------------------------------------------------------------------
    def _load(self) -> List[LinkRecord]:
        raw = self.store.get_item(self.storage_key)
        if not raw:
            return []
        try:
            return LinkCollection.validate_json(raw)
        except ValidationError as exc:
            raise StorageError(f"Collection under {self.storage_key!r} is not a list of links") from exc

    def _save(self, records: List[LinkRecord]) -> None:
        payload = LinkCollection.dump_json(records, by_alias=True).decode("utf-8")
        self.store.set_item(self.storage_key, payload)

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------
    def create(self, url: str, custom_slug: Optional[str] = None) -> LinkRecord:
        """
        Create a link for `url`, using `custom_slug` when it is non-empty.

        Rules:
            - `url` must parse as an absolute URL, else InvalidURLError.
            - The slug is `custom_slug` if given, otherwise one fresh random slug.
            - If the slug is already stored, DuplicateSlugError (no retry for
              generated slugs; the user resubmits).
            - The new record starts with clicks=0, lastClicked=None and
              expiresAt exactly 24 hours after createdAt.

        Returns:
            LinkRecord: The stored record.
        """
        if not is_absolute_url(url):
            logger.warning("Rejected invalid URL %r", url)
            raise InvalidURLError(f"Invalid URL: {url!r}")

        slug = custom_slug or self.slug_strategy.generate()
        records = self._load()
        if any(r.slug == slug for r in records):
            logger.warning("Rejected duplicate slug %r", slug)
            raise DuplicateSlugError(f"Slug already exists: {slug!r}")

        now = self.clock()
        record = LinkRecord(
            slug=slug,
            url=url,
            created_at=now,
            expires_at=now + LINK_LIFETIME,
            clicks=0,
            last_clicked=None,
        )
        records.append(record)
        self._save(records)
        logger.info("Created link %s -> %s", slug, url)
        return record

    def find_by_slug(self, slug: str) -> Optional[LinkRecord]:
        """Exact-match lookup; no normalisation, no partial matching."""
        for record in self._load():
            if record.slug == slug:
                return record
        return None

    def record_click(self, slug: str) -> Optional[LinkRecord]:
        """
        Increment clicks and stamp lastClicked for `slug`.

        Returns:
            Optional[LinkRecord]: The updated record, or None (store untouched) if absent.
        """
        records = self._load()
        for index, record in enumerate(records):
            if record.slug == slug:
                updated = record.model_copy(
                    update={"clicks": record.clicks + 1, "last_clicked": self.clock()}
                )
                records[index] = updated
                self._save(records)
                logger.info("Recorded click on %s (total %d)", slug, updated.clicks)
                return updated
        return None

    def delete(self, slug: str) -> bool:
        """Remove the record for `slug`; returns whether a removal occurred."""
        records = self._load()
        remaining = [r for r in records if r.slug != slug]
        if len(remaining) == len(records):
            return False
        self._save(remaining)
        logger.info("Deleted link %s", slug)
        return True

    def list_links(self) -> List[LinkRecord]:
        """All records, in insertion order."""
        return self._load()

    def is_empty(self) -> bool:
        return not self._load()
