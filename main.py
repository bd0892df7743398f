"""
Main API module for the Friendly URL Shortener.

Responsibilities:
    - Creation view: shorten a URL with an optional custom slug
    - Redirect view: resolve /{slug}, record the click and redirect
    - Analytics dashboard: list links with clicks and status, summary, delete

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - One LinkRegistry is built per app and shared by the creation and
      redirect views; it is the sole owner of the link collection.
    - The redirect view goes through a Navigator, so the resolver never sees
      request objects.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Query, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from friendly_shortener.analytics.analytics import LinkAnalytics
from friendly_shortener.config import settings
from friendly_shortener.errors import ShortenerError, SlugNotFoundError
from friendly_shortener.models import CreationResult
from friendly_shortener.navigation.navigator import ResponseNavigator, follow_redirect
from friendly_shortener.registry.link_registry import LinkRegistry
from friendly_shortener.registry.resolver import RedirectResolver
from friendly_shortener.storage.storage_factory import get_store

NOT_FOUND_MESSAGE = "Short link not found"


class ShortenRequest(BaseModel):
    """Request payload for creating a new short link."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    custom_slug: Optional[str] = Field(default=None, alias="customSlug")


def create_app(registry: Optional[LinkRegistry] = None, base_url: Optional[str] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        registry (Optional[LinkRegistry]): Registry to serve; built from the
            configured storage backend when omitted.
        base_url (Optional[str]): Origin for short URLs; falls back to
            `settings.BASE_URL`, then to the origin of each request.

    Returns:
        FastAPI: A configured application with its own registry.
    """
    app = FastAPI(
        title="Friendly URL Shortener",
        description="Single-profile URL shortener with click analytics",
        docs_url="/docs",
    )
    log = logging.getLogger("friendly_shortener")
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, swappable for production)
    # ----------------------------------------------------------------
    if registry is None:
        registry = LinkRegistry(store=get_store(ensure_schema=True))
    resolver = RedirectResolver(registry)
    navigator = ResponseNavigator(status_code=302)
    log.info("Link registry ready (store: %s)", type(registry.store).__name__)

    app.state.registry = registry

    def _origin(request: Request) -> str:
        return (base_url or settings.BASE_URL or str(request.base_url)).rstrip("/")

    @app.exception_handler(ShortenerError)
    async def shortener_error_handler(request: Request, exc: ShortenerError) -> JSONResponse:
        log.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.user_message})

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Creation view
    # ----------------------------------------------------------------
    @app.get("/")
    def index(error: Optional[str] = Query(None)) -> Dict[str, Any]:
        """
        State of the creation page: link count and any error carried in the
        query string (the redirect view sends unknown slugs to /?error=notfound).
        """
        message = None
        if error == "notfound":
            message = NOT_FOUND_MESSAGE
        elif error:
            message = error
        return {
            "message": "Create a Short Link",
            "links": len(registry.list_links()),
            "error": message,
        }

    @app.post("/links", status_code=201)
    def create_link(req: ShortenRequest, request: Request) -> Dict[str, Any]:
        """
        Create a short link.

        Returns:
            dict: {shortUrl, slug, url, expiresAt}

        Raises:
            InvalidURLError, DuplicateSlugError: answered with 400 and a
                readable message by the ShortenerError handler.
        """
        record = registry.create(req.url, req.custom_slug)
        return CreationResult.from_record(record, _origin(request)).to_json_dict()

    # ----------------------------------------------------------------
    # Analytics dashboard
    # ----------------------------------------------------------------
    @app.get("/links")
    def list_links(request: Request) -> List[Dict[str, Any]]:
        return LinkAnalytics(registry, _origin(request)).rows()

    @app.get("/links/summary")
    def links_summary(request: Request) -> Dict[str, Any]:
        return LinkAnalytics(registry, _origin(request)).summary()

    @app.delete("/links/{slug:path}")
    def delete_link(slug: str) -> Dict[str, Any]:
        if not registry.delete(slug):
            raise SlugNotFoundError(f"No link for slug {slug!r}")
        return {"deleted": True, "message": "Link deleted"}

    # ----------------------------------------------------------------
    # Redirect view (declared last so it never shadows the routes above)
    # ----------------------------------------------------------------
    @app.get("/{slug:path}", name="redirect_link")
    def redirect_link(slug: str) -> Response:
        return follow_redirect(resolver, navigator, slug)

    return app


# `uvicorn main:app --reload` and `from main import app` keep working.
app = create_app()
