"""
Storage module for the Friendly URL Shortener (in-memory implementation).

Responsibilities:
    - Hold string values under string keys, like browser local storage
    - Back the registry in tests and in the default "memory" configuration

Design:
    - This is an in-memory reference implementation of the BaseStore contract.
    - It is intentionally simple to keep unit/integration tests fast and deterministic.
    - State lives as long as the instance; use the "file" backend to keep links
      between runs.
"""

from typing import Dict, Optional

from .base import BaseStore


class MemoryStore(BaseStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        """
        Initialize the store, optionally pre-seeded.

        Internal schema:
            self.items = {key: value_text}
        """
        self.items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
