"""
Error types for the Friendly URL Shortener.

All user-facing failures derive from `ShortenerError`, which is itself a
`ValueError` so callers that only know about bad input can keep catching that.
Surfaces (HTTP app, CLI) turn these into readable messages; none of them are
fatal to the process.
"""


class ShortenerError(ValueError):
    """Base class for link registry errors."""

    #: Human-readable text shown by the creation view.
    user_message = "Something went wrong"
    #: HTTP status the web app answers with.
    status_code = 400


class InvalidURLError(ShortenerError):
    """Raised when the submitted URL does not parse as an absolute URL."""

    user_message = "Invalid URL. Please enter a valid URL!"


class DuplicateSlugError(ShortenerError):
    """Raised when the requested or generated slug is already taken."""

    user_message = "Slug already exists!"


class SlugNotFoundError(ShortenerError):
    """Raised by surfaces when an operation targets a slug that is not stored."""

    user_message = "Link not found"
    status_code = 404


class StorageError(ShortenerError):
    """Raised when the persisted collection cannot be decoded."""

    user_message = "Stored links are unreadable"
    status_code = 503
