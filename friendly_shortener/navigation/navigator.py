"""
Navigation capability for the redirect view.

The redirect view never touches request or environment globals itself; it is
handed a navigator that knows how to perform the two navigations it needs:

- navigate(url):   full navigation to the link's target URL
- replace(route):  replacement navigation to an in-app route (the not-found
                   indicator, "/?error=notfound")

`ResponseNavigator` turns these into HTTP redirects for the web app;
`RecordingNavigator` keeps a history and is used by the CLI and tests.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from fastapi.responses import RedirectResponse

from ..registry.resolver import Redirect, RedirectResolver

NOT_FOUND_ROUTE = "/?error=notfound"


class BaseNavigator(ABC):
    """Abstract base for navigation backends."""

    @abstractmethod
    def navigate(self, url: str) -> Any:  # pragma: no cover
        """Perform a full navigation to `url`."""
        raise NotImplementedError

    @abstractmethod
    def replace(self, route: str) -> Any:  # pragma: no cover
        """Replace the current location with the in-app `route`."""
        raise NotImplementedError


class ResponseNavigator(BaseNavigator):
    """Navigator producing Starlette redirect responses."""

    def __init__(self, status_code: int = 302):
        self.status_code = status_code

    def navigate(self, url: str) -> RedirectResponse:
        return RedirectResponse(url=url, status_code=self.status_code)

    def replace(self, route: str) -> RedirectResponse:
        return RedirectResponse(url=route, status_code=self.status_code)


class RecordingNavigator(BaseNavigator):
    """
    Navigator that only records where it was asked to go.

    history: list of ("navigate" | "replace", target) tuples, oldest first.
    """

    def __init__(self):
        self.history: List[Tuple[str, str]] = []

    def navigate(self, url: str) -> str:
        self.history.append(("navigate", url))
        return url

    def replace(self, route: str) -> str:
        self.history.append(("replace", route))
        return route

    @property
    def current(self) -> Optional[Tuple[str, str]]:
        return self.history[-1] if self.history else None


def follow_redirect(resolver: RedirectResolver, navigator: BaseNavigator, slug: str) -> Any:
    """
    Run the redirect page for `slug`.

    Returns whatever the navigator returns (a response for the web app, the
    target for the recording navigator). An empty slug goes to the not-found
    route without touching the registry.
    """
    if not slug:
        return navigator.replace(NOT_FOUND_ROUTE)
    outcome = resolver.resolve(slug)
    if isinstance(outcome, Redirect):
        return navigator.navigate(outcome.url)
    return navigator.replace(NOT_FOUND_ROUTE)
