"""Link registry, slug strategies and redirect resolver."""

from .link_registry import LinkRegistry, is_absolute_url
from .resolver import NotFound, Redirect, RedirectResolver
from .strategies import RandomSlugStrategy

__all__ = [
    "LinkRegistry",
    "NotFound",
    "RandomSlugStrategy",
    "Redirect",
    "RedirectResolver",
    "is_absolute_url",
]
