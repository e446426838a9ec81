"""Redis sliding window rate limiter.

Each key is a sorted set of request timestamps (milliseconds). A Lua script
trims entries older than the window, then admits and records the request
only if the window still has room, so the check and the write are atomic
across application instances.
"""

import logging
import math
import time
import uuid

from redis.asyncio import Redis

from stackit.adapter.error import AdapterError
from stackit.domain.service.rate_limit_service import RateLimitDecision, RateLimiter

logger = logging.getLogger(__name__)

SLIDING_WINDOW_SCRIPT = """
local key = KEYS[1]
local now = tonumber(ARGV[1])
local window = tonumber(ARGV[2])
local limit = tonumber(ARGV[3])
local member = ARGV[4]

redis.call('ZREMRANGEBYSCORE', key, 0, now - window)
local count = redis.call('ZCARD', key)
if count < limit then
    redis.call('ZADD', key, now, member)
    redis.call('PEXPIRE', key, window)
    return {1, limit - count - 1, 0}
end

local oldest = redis.call('ZRANGE', key, 0, 0, 'WITHSCORES')
return {0, 0, tonumber(oldest[2]) + window - now}
"""


class RedisRateLimiter(RateLimiter):
    """Rate limiter whose counters live in Redis."""

    def __init__(self, client: Redis) -> None:
        self.client = client
        self._script = client.register_script(SLIDING_WINDOW_SCRIPT)

    async def hit(self, key: str, limit: int, window_seconds: int) -> RateLimitDecision:
        now_ms = int(time.time() * 1000)
        window_ms = window_seconds * 1000
        try:
            allowed, remaining, retry_ms = await self._script(
                keys=[key],
                args=[now_ms, window_ms, limit, f"{now_ms}:{uuid.uuid4().hex}"],
            )
        except Exception as e:
            logger.error("Rate limiter unavailable: %s", e)
            raise AdapterError(f"Rate limiter unavailable: {e}") from e

        return RateLimitDecision(
            allowed=bool(allowed),
            remaining=int(remaining),
            retry_after=max(1, math.ceil(int(retry_ms) / 1000)) if not allowed else 0,
        )
