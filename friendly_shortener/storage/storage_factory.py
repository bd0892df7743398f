"""
Storage factory – switch key-value backend from config (lazy env version)
========================================================================

This module centralizes selection of the storage backend (memory, JSON file
or Postgres) so the rest of the app can stay ignorant of where data lives.

- Reads environment **at call time** to avoid stale values in tests.
- Imports the DB backend **only if** the selected backend is "postgres".

Environment variables
---------------------
- SHORTENER_STORAGE_BACKEND: "memory" (default), "file" or "postgres"
- SHORTENER_STORAGE_PATH:    JSON file path if backend=="file"
- SHORTENER_DB_DSN:          DSN string if backend=="postgres"
"""

import logging
import os
from typing import Optional

from friendly_shortener.storage.base import BaseStore
from friendly_shortener.storage.file_storage import FileStore
from friendly_shortener.storage.storage import MemoryStore

logger = logging.getLogger(__name__)


def get_store(backend: Optional[str] = None, **kwargs) -> BaseStore:
    """
    Return a BaseStore implementation based on configuration.

    Parameters
    ----------
    backend : str, optional
        "memory", "file" or "postgres". If omitted, reads SHORTENER_STORAGE_BACKEND.
    kwargs : dict
        Extra args for the backend: path="..." for file, dsn="..." for postgres.

    Returns
    -------
    BaseStore-compatible instance
    """
    be = (backend or os.getenv("SHORTENER_STORAGE_BACKEND", "memory")).strip().lower()
    logger.info("Selected storage backend: %r", be)

    if be == "memory":
        return MemoryStore()

    if be == "file":
        path = kwargs.get("path") or os.getenv("SHORTENER_STORAGE_PATH", "short_links.json")
        return FileStore(path=path)

    if be == "postgres":
        dsn = kwargs.get("dsn") or os.getenv("SHORTENER_DB_DSN", "")
        if not dsn:
            raise ValueError("DB_DSN is required for postgres backend (env SHORTENER_DB_DSN)")
        # Local import to avoid hard dependency when not using postgres
        from friendly_shortener.storage.db_storage import DBStore

        store = DBStore(dsn=dsn)
        if kwargs.get("ensure_schema"):
            store.ensure_schema()
        return store

    raise ValueError(f"Unknown storage backend: {be!r}")
