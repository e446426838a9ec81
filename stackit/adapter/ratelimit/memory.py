"""Process-local sliding window rate limiter.

Suitable for a single instance and for tests; counters are not shared
between processes.
"""

import math
import time
from collections import deque
from typing import Callable

from stackit.domain.service.rate_limit_service import RateLimitDecision, RateLimiter


class InMemoryRateLimiter(RateLimiter):
    """Sliding window limiter over per-key timestamp deques.

    Keys whose window has fully elapsed are dropped by a sweep that runs at
    most once per ``sweep_interval`` seconds, so idle identities do not
    accumulate.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sweep_interval: float = 60.0,
    ) -> None:
        self.clock = clock
        self.sweep_interval = sweep_interval
        self._hits: dict[str, deque[float]] = {}
        self._windows: dict[str, int] = {}
        self._next_sweep = clock() + sweep_interval

    @property
    def tracked_keys(self) -> int:
        return len(self._hits)

    async def hit(self, key: str, limit: int, window_seconds: int) -> RateLimitDecision:
        now = self.clock()
        if now >= self._next_sweep:
            self._sweep(now)

        hits = self._hits.setdefault(key, deque())
        self._windows[key] = window_seconds
        while hits and hits[0] <= now - window_seconds:
            hits.popleft()

        if len(hits) < limit:
            hits.append(now)
            return RateLimitDecision(
                allowed=True, remaining=limit - len(hits), retry_after=0
            )

        if not hits:
            # limit of zero: nothing to wait for but the window itself
            self._forget(key)
            return RateLimitDecision(
                allowed=False, remaining=0, retry_after=max(1, window_seconds)
            )

        retry_after = max(1, math.ceil(hits[0] + window_seconds - now))
        return RateLimitDecision(allowed=False, remaining=0, retry_after=retry_after)

    def reset(self) -> None:
        self._hits.clear()
        self._windows.clear()

    def _sweep(self, now: float) -> None:
        expired = [
            key
            for key, hits in self._hits.items()
            if not hits or hits[-1] <= now - self._windows[key]
        ]
        for key in expired:
            self._forget(key)
        self._next_sweep = now + self.sweep_interval

    def _forget(self, key: str) -> None:
        self._hits.pop(key, None)
        self._windows.pop(key, None)
