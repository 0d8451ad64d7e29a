"""A small in-memory cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: bytes


class Cache:
    """Thread-safe byte cache with a background reaper.

    Every ``interval`` seconds the reaper drops entries that are at least
    ``interval`` seconds old.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="pokecache-reaper", daemon=True
        )
        self._reaper.start()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            self._reap()

    def _reap(self) -> None:
        now = time.monotonic()
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at >= self.interval
            ]
            for key in expired:
                del self._entries[key]

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier value."""
        with self._lock:
            self._entries[key] = _Entry(time.monotonic(), bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.val

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()