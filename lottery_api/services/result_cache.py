"""Time-boxed in-process cache of assembled lottery records."""

from __future__ import annotations

import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    value: V
    stored_at: float


class ResultCache(Generic[V]):
    """Key -> value store with lazy expiry after ``max_age_seconds``."""

    def __init__(self, max_age_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        if max_age_seconds <= 0:
            raise ValueError("max_age_seconds must be positive")
        self._max_age = float(max_age_seconds)
        self._clock = clock
        self._lock = Lock()
        self._entries: dict[str, CacheEntry[V]] = {}

    @property
    def max_age_seconds(self) -> float:
        return self._max_age

    def get(self, key: str) -> V | None:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self._max_age:
            return None
        return entry.value

    def set(self, key: str, value: V) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(value=value, stored_at=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
