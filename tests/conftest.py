"""
Global pytest fixtures for the Friendly URL Shortener test suite.

Responsibilities:
    - Provide a controllable clock so time-dependent properties are exact
    - Provide isolated in-memory stores and registries for direct testing
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from main import create_app
from friendly_shortener.registry.link_registry import LinkRegistry
from friendly_shortener.registry.resolver import RedirectResolver
from friendly_shortener.storage.storage import MemoryStore

START = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = START):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> MemoryStore:
    """Fresh in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def registry(store: MemoryStore, clock: FakeClock) -> LinkRegistry:
    """Registry wired to the store and clock fixtures."""
    return LinkRegistry(store=store, clock=clock)


@pytest.fixture
def resolver(registry: LinkRegistry) -> RedirectResolver:
    return RedirectResolver(registry)


@pytest.fixture
def client(registry: LinkRegistry) -> TestClient:
    """
    Fresh TestClient around a new app instance sharing the registry fixture,
    so tests can assert on the registry directly.
    """
    app = create_app(registry=registry)
    return TestClient(app, follow_redirects=False)
