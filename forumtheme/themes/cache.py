"""Process-wide cache of parsed theme documents."""

from __future__ import annotations

from threading import RLock
from typing import Protocol

from forumtheme.themes.models import ThemeDocument


class DocumentCache(Protocol):
    def get(self, key: str) -> ThemeDocument | None: ...

    def set(self, key: str, document: ThemeDocument) -> None: ...


class ProcessDocumentCache:
    """Caches ThemeDocument instances per theme identifier.

    Concurrent misses for one key may each parse and store a document; the
    last writer wins. Documents are immutable, so readers never observe a
    partially built entry.
    """

    def __init__(self) -> None:
        self._documents: dict[str, ThemeDocument] = {}
        self._lock = RLock()

    def get(self, key: str) -> ThemeDocument | None:
        with self._lock:
            return self._documents.get(key)

    def set(self, key: str, document: ThemeDocument) -> None:
        with self._lock:
            self._documents[key] = document

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._documents.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._documents)

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)


_shared_cache = ProcessDocumentCache()


def shared_document_cache() -> ProcessDocumentCache:
    """Return the cache shared by every service in this process."""
    return _shared_cache
