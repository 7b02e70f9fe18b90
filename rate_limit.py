"""Per-client fixed-window rate limiting.

One ``RateLimiter`` per endpoint, each backed by its own window store. The
store is passed in rather than looked up globally so tests (or a shared cache
later on) can provide their own.
"""
from __future__ import annotations

import math
import random
import threading
import time
from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple

from pydantic import BaseModel

UNKNOWN_CLIENT = "unknown"


class ClientWindow(BaseModel):
    client_key: str
    count: int
    window_end: float  # POSIX seconds


class RateLimitDecision(BaseModel):
    limited: bool
    retry_after_s: Optional[int] = None


class InMemoryWindowStore:
    """Process-local window store. Lost on restart."""

    def __init__(self) -> None:
        self._windows: Dict[str, ClientWindow] = {}

    def get(self, client_key: str) -> Optional[ClientWindow]:
        return self._windows.get(client_key)

    def put(self, window: ClientWindow) -> None:
        self._windows[window.client_key] = window

    def delete(self, client_key: str) -> None:
        self._windows.pop(client_key, None)

    def items(self) -> Iterator[Tuple[str, ClientWindow]]:
        # Snapshot so callers may delete while iterating
        return iter(list(self._windows.items()))

    def clear(self) -> None:
        self._windows.clear()

    def __len__(self) -> int:
        return len(self._windows)


class RateLimiter:
    def __init__(
        self,
        store: InMemoryWindowStore,
        max_requests: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.time,
        rng: Callable[[], float] = random.random,
        sweep_probability: float = 0.01,
    ) -> None:
        self.store = store
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._rng = rng
        self.sweep_probability = sweep_probability
        # Route handlers run on the worker thread pool
        self._lock = threading.Lock()

    def check(self, client_key: str) -> RateLimitDecision:
        with self._lock:
            now = self._clock()

            if self._rng() < self.sweep_probability:
                self._sweep(now)

            window = self.store.get(client_key)
            if window is None or now > window.window_end:
                self.store.put(
                    ClientWindow(
                        client_key=client_key,
                        count=1,
                        window_end=now + self.window_seconds,
                    )
                )
                return RateLimitDecision(limited=False)

            if window.count >= self.max_requests:
                retry_after = max(1, math.ceil(window.window_end - now))
                return RateLimitDecision(limited=True, retry_after_s=retry_after)

            window.count += 1
            self.store.put(window)
            return RateLimitDecision(limited=False)

    def _sweep(self, now: float) -> int:
        expired = [key for key, w in self.store.items() if now > w.window_end]
        for key in expired:
            self.store.delete(key)
        return len(expired)


def client_key_from_request(headers: Mapping[str, str], peer_host: Optional[str] = None) -> str:
    """Identify the caller for rate limiting.

    Order: X-Real-IP (set by the trusted proxy), leftmost X-Forwarded-For
    entry, the socket peer, then the shared "unknown" bucket.
    """
    real_ip = (headers.get("x-real-ip") or "").strip()
    if real_ip:
        return real_ip

    forwarded = headers.get("x-forwarded-for") or ""
    first = forwarded.split(",")[0].strip()
    if first:
        return first

    if peer_host:
        return peer_host
    return UNKNOWN_CLIENT
