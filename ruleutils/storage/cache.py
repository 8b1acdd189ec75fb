from __future__ import annotations

from threading import Lock
from typing import Any, Dict, Hashable, List, Optional, Protocol


class Cache(Protocol):
    """Shared key-value store owned by the host process."""

    def get(self, key: Hashable) -> Optional[Any]:
        ...

    def put(self, key: Hashable, value: Any) -> None:
        ...


class InMemoryCache:
    """Process-wide cache backed by a plain dict."""

    def __init__(self) -> None:
        self._data: Dict[Hashable, Any] = {}
        self._lock = Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            return self._data.get(key)

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def keys(self) -> List[Hashable]:
        with self._lock:
            return list(self._data)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
