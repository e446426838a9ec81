"""Rate limiting infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from redis.asyncio import Redis

from stackit.adapter.ratelimit import RedisRateLimiter
from stackit.config import Settings
from stackit.domain.service import RateLimiter
from stackit.util.di.base import ProviderBase


class RateLimitProvider(ProviderBase):
    """Rate limiter component base."""

    __mock_component__ = "ratelimit"


class ProdRateLimitProvider(RateLimitProvider):
    """Rate limiter backed by Redis, shared across instances."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_redis(self, settings: Settings) -> AsyncIterator[Redis]:
        """Provide Redis client, closed on container close."""
        client = Redis.from_url(settings.redis.url, decode_responses=True)
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_rate_limiter(self, client: Redis) -> RateLimiter:
        return RedisRateLimiter(client)
