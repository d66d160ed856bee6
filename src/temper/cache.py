"""TimedCache - a mapping whose entries expire on independently scheduled timers."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

log = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class TimedCache(Generic[K, V]):
    """In-process cache where every key owns exactly one eviction timer.

    Re-setting a key cancels its pending timer and schedules a fresh one, so
    the TTL always counts from the most recent ``set``. Reads never extend
    the TTL. Expiry runs on timer threads; all state is guarded by a lock.

    Example:
        cache = TimedCache(on_evict=lambda key: print("evicted", key))
        cache.set("jinja2", module, ttl=300)
        cache.get("jinja2")
    """

    def __init__(self, on_evict: Callable[[K], None] | None = None):
        self._lock = threading.RLock()
        self._store: dict[K, V] = {}
        self._timers: dict[K, threading.Timer] = {}
        self._on_evict = on_evict
        self._destroyed = False

    def set(self, key: K, value: V, ttl: float) -> None:
        """Store a value and (re)schedule its eviction after ``ttl`` seconds."""
        with self._lock:
            if self._destroyed:
                log.debug("ignoring set(%r) on destroyed cache", key)
                return

            previous = self._timers.pop(key, None)
            if previous is not None:
                previous.cancel()

            timer = threading.Timer(ttl, self._expire, args=(key,))
            timer.daemon = True
            self._store[key] = value
            self._timers[key] = timer
            timer.start()

    def get(self, key: K, default: Any = None) -> V | Any:
        with self._lock:
            return self._store.get(key, default)

    def has(self, key: K) -> bool:
        with self._lock:
            return key in self._store

    def delete(self, key: K) -> bool:
        """Remove a key and cancel its timer. Returns whether it was present."""
        with self._lock:
            timer = self._timers.pop(key, None)
            if timer is not None:
                timer.cancel()
            if key not in self._store:
                return False
            del self._store[key]
            return True

    def keys(self) -> list[K]:
        with self._lock:
            return list(self._store)

    def destroy(self) -> bool:
        """Cancel every timer and drop every entry.

        Returns:
            True if the cache was live, False if it had already been destroyed.
        """
        with self._lock:
            if self._destroyed:
                return False
            for timer in self._timers.values():
                timer.cancel()
            self._timers.clear()
            self._store.clear()
            self._destroyed = True
            return True

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def _expire(self, key: K) -> None:
        current = threading.current_thread()
        with self._lock:
            # A later set() replaced this timer; the newer value stays.
            if self._timers.get(key) is not current:
                return
            del self._timers[key]
            self._store.pop(key, None)

        if self._on_evict is None:
            return
        try:
            self._on_evict(key)
        except Exception:
            log.exception("eviction hook failed for %r", key)
