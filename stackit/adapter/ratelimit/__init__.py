"""Rate limiter backends."""

from stackit.adapter.ratelimit.memory import InMemoryRateLimiter
from stackit.adapter.ratelimit.redis import RedisRateLimiter

__all__ = ["InMemoryRateLimiter", "RedisRateLimiter"]
