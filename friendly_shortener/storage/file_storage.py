"""
FileStore: JSON-file-backed key-value store
===========================================

Plays the role of browser local storage on disk: a single JSON object
mapping keys to string values. Every call reads or rewrites the whole file,
so two processes sharing a file follow last-writer-wins, just like two
browser tabs sharing local storage.

Writes go to a temporary file in the same directory and are moved into place
with `os.replace`, so a reader never observes a half-written file.

Example
-------
>>> store = FileStore("short_links.json")
>>> store.set_item("shortLinks", "[]")
>>> store.get_item("shortLinks")
'[]'
"""

import json
import logging
import os
import tempfile
from typing import Dict, Optional

from ..errors import StorageError
from .base import BaseStore

logger = logging.getLogger(__name__)


class FileStore(BaseStore):
    """Key-value store persisted as one JSON object in `path`."""

    def __init__(self, path: str) -> None:
        self.path = os.path.abspath(path)

    # ---- Internal helpers -------------------------------------------------

    def _read_all(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            raise StorageError(f"Store file {self.path!r} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Store file {self.path!r} must hold a JSON object")
        return data

    def _write_all(self, items: Dict[str, str]) -> None:
        directory = os.path.dirname(self.path)
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".store-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug("Wrote %d key(s) to %s", len(items), self.path)

    # ---- Contract methods -------------------------------------------------

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)
