"""
Base key-value store interface for the Friendly URL Shortener.

Purpose:
    Define the small local-storage-like contract (string keys, string values)
    that the link registry persists its collection through. Backends
    (in-memory, JSON file, Postgres) implement it without requiring changes
    to registry code.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseStore(ABC):
    """Abstract base class for key-value storage backends."""

    @abstractmethod  # pragma: no cover
    def get_item(self, key: str) -> Optional[str]:
        """
        Return the value stored under `key`.

        Returns:
            Optional[str]: The stored text, or None if the key was never set.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def set_item(self, key: str, value: str) -> None:
        """
        Store `value` under `key`, replacing any previous value (last writer wins).
        """
        raise NotImplementedError
