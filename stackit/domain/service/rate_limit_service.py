"""Per-identity rate limiting."""

from dataclasses import dataclass
from enum import Enum

import logfire

from stackit.config import RateLimitSettings
from stackit.domain.error import RateLimitExceededError

from .base import Service


class RateLimitedAction(str, Enum):
    """Write actions with a per-identity budget."""

    VOTE = "vote"
    ANSWER = "answer"
    QUESTION = "question"


@dataclass
class RateLimitDecision:
    """Outcome of counting one request against a window."""

    allowed: bool
    remaining: int
    retry_after: int  # Seconds until the oldest counted request leaves the window


class RateLimiter:
    """Sliding window counter shared by all application instances."""

    async def hit(self, key: str, limit: int, window_seconds: int) -> RateLimitDecision:
        """Count a request under ``key`` if the window has room.

        Rejected requests are not counted.

        Args:
            key: Counter key (action and identity)
            limit: Maximum requests per window
            window_seconds: Window length

        Returns:
            Decision for this request
        """
        raise NotImplementedError


class RateLimitService(Service):
    """Enforces the configured per-action budgets."""

    def __init__(self, rate_limiter: RateLimiter, settings: RateLimitSettings) -> None:
        self.rate_limiter = rate_limiter
        self.settings = settings

    def limit_for(self, action: RateLimitedAction) -> int:
        return {
            RateLimitedAction.VOTE: self.settings.votes_per_window,
            RateLimitedAction.ANSWER: self.settings.answers_per_window,
            RateLimitedAction.QUESTION: self.settings.questions_per_window,
        }[action]

    async def check(self, action: RateLimitedAction, identity: str) -> None:
        """Count a request by ``identity`` against the budget for ``action``.

        Raises:
            RateLimitExceededError: If the budget is exhausted
        """
        limit = self.limit_for(action)
        window = self.settings.window_seconds
        decision = await self.rate_limiter.hit(
            f"ratelimit:{action.value}:{identity}", limit, window
        )
        if not decision.allowed:
            logfire.warn(
                "Rate limit exceeded",
                action=action.value,
                identity=identity,
                retry_after=decision.retry_after,
            )
            raise RateLimitExceededError(action.value, limit, window, decision.retry_after)
