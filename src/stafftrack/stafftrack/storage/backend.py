from __future__ import annotations

from typing import Optional, Protocol


class KeyValueBackend(Protocol):
    """Key-value store holding the serialized document.

    DataStore depends on this protocol rather than on a concrete file or backend.
    Implementations raise `StorageError` when the underlying medium fails.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class InMemoryBackend(KeyValueBackend):
    """Dict-backed backend; nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value
