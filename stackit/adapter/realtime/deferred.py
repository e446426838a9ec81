"""Request-scoped publisher that holds pushes until the request's writes land.

Notifications are written inside the request's database transaction. Pushing
them straight away would let a client see an event for a row that is not yet
committed, or never will be. ``DeferredPublisher`` collects pushes for the
lifetime of one request and hands them to the shared hub only after the
transaction has committed.
"""

import logging
from typing import Any, Optional

from stackit.domain.service.notification_dispatcher import NotificationPublisher
from stackit.domain.value import UserId

logger = logging.getLogger(__name__)


class DeferredPublisher(NotificationPublisher):
    """Buffers pushes for one unit of work."""

    def __init__(self, publisher: NotificationPublisher) -> None:
        self.publisher = publisher
        self._pending: list[tuple[UserId, str, dict[str, Any]]] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def publish(self, user_id: UserId, event: str, data: dict[str, Any]) -> int:
        """Queue a push; nothing reaches a connection before ``flush``."""
        self._pending.append((user_id, event, data))
        return 0

    async def flush(self) -> int:
        """Hand queued pushes to the underlying publisher.

        Delivery is best effort; a failed push is logged and the rest are
        still sent.

        Returns:
            Number of connections the pushes were queued for
        """
        pending, self._pending = self._pending, []
        delivered = 0
        for user_id, event, data in pending:
            try:
                delivered += await self.publisher.publish(user_id, event, data)
            except Exception as e:
                logger.warning("Push of %s event to %s failed: %s", event, user_id, e)
        return delivered

    def discard(self) -> int:
        """Drop queued pushes. Returns how many were dropped."""
        dropped = len(self._pending)
        self._pending = []
        if dropped:
            logger.info("Discarded %d pushes of a failed unit of work", dropped)
        return dropped

    async def close(self, error: Optional[BaseException] = None) -> None:
        """End of the unit of work: flush on success, discard on failure."""
        if error is None:
            await self.flush()
        else:
            self.discard()
