"""Key-value storage backends. The Postgres backend is imported on demand."""

from .base import BaseStore
from .file_storage import FileStore
from .storage import MemoryStore
from .storage_factory import get_store

__all__ = ["BaseStore", "FileStore", "MemoryStore", "get_store"]
