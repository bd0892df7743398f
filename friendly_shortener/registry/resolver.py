"""
Redirect resolver for the Friendly URL Shortener.

Turns a requested slug into an outcome:

    Start -> registry empty?      -> NotFound
    Start -> lookup -> found      -> record_click -> Redirect(url)
                    -> not found  -> NotFound

Single pass, synchronous, no retries. Expiry is not checked here: an expired
link still redirects and is only shown as "Expired" on the dashboard.
"""

import logging
from dataclasses import dataclass
from typing import Union

from .link_registry import LinkRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Redirect:
    """Navigate to `url`."""

    url: str


@dataclass(frozen=True)
class NotFound:
    """No link is stored under `slug` (or nothing is stored at all)."""

    slug: str


Outcome = Union[Redirect, NotFound]


class RedirectResolver:
    def __init__(self, registry: LinkRegistry):
        self.registry = registry

    def resolve(self, slug: str) -> Outcome:
        """
        Resolve `slug` and record the visit on a match.

        Raises:
            ValueError: If `slug` is empty.
        """
        if not slug:
            raise ValueError("Slug must be a non-empty string")

        if self.registry.is_empty():
            logger.info("Resolve %r: registry is empty", slug)
            return NotFound(slug)

        if self.registry.find_by_slug(slug) is None:
            logger.info("Resolve %r: not found", slug)
            return NotFound(slug)

        updated = self.registry.record_click(slug)
        if updated is None:
            # Removed by another writer between lookup and click
            return NotFound(slug)
        return Redirect(updated.url)
