"""Key/value stores that loaded configuration is written into.

The default store is the process environment, so settings loaded from a
file are visible to ``os.environ`` and to child processes. ``MemoryStore``
keeps values in a private dictionary; it is useful in tests and when
several threads share one store.
"""

from __future__ import annotations

import os
import threading
from typing import Dict, MutableMapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for stores that hold flattened configuration.

    Keys and values are strings. Implementations are free to hold keys
    that were not written by flatenv (e.g. real environment variables).
    """

    def get(self, key: str) -> Optional[str]:
        """Return the value for ``key``, or None if it is not set."""
        ...

    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``, replacing any existing value.

        Raises:
            ValueError: If the store cannot hold this key or value
        """
        ...

    def unset(self, key: str) -> None:
        """Remove ``key``; removing a missing key is a no-op."""
        ...

    def contains(self, key: str) -> bool:
        """Check whether ``key`` is set."""
        ...

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of every key/value pair in the store."""
        ...


class EnvironStore:
    """Store backed by the process environment.

    Example:
        store = EnvironStore()
        store.set("APP_DEBUG", "true")
        assert os.environ["APP_DEBUG"] == "true"
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        """Initialize the store.

        Args:
            environ: Mapping to operate on (default: os.environ, looked up
                on every call so test patches are honoured)
        """
        self._environ = environ

    @property
    def environ(self) -> MutableMapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def get(self, key: str) -> Optional[str]:
        return self.environ.get(key)

    def set(self, key: str, value: str) -> None:
        self.environ[key] = value

    def unset(self, key: str) -> None:
        self.environ.pop(key, None)

    def contains(self, key: str) -> bool:
        return key in self.environ

    def snapshot(self) -> Dict[str, str]:
        return dict(self.environ)


class MemoryStore:
    """In-memory store with a lock around each operation.

    Single operations are thread-safe; a whole ``NamespaceWriter.apply``
    is not atomic.

    Example:
        store = MemoryStore({"PRESET": "1"})
        store.set("APP_DEBUG", "true")
        store.snapshot()  # {"PRESET": "1", "APP_DEBUG": "true"}
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def unset(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return self._data.copy()

    def clear(self) -> None:
        """Remove every key. Useful for test cleanup."""
        with self._lock:
            self._data.clear()


__all__ = ["KeyValueStore", "EnvironStore", "MemoryStore"]
