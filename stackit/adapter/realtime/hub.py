"""In-process connection hub for real-time notifications.

Every open WebSocket registers a ``Subscription`` in the room of its user.
Publishing enqueues the message on each subscription's bounded queue and
returns immediately; a sender task per connection drains the queue onto the
socket. A subscriber that falls behind loses messages instead of slowing
down publishers.
"""

import asyncio
import logging
from collections import defaultdict
from typing import Any

from stackit.domain.service.notification_dispatcher import NotificationPublisher
from stackit.domain.value import UserId

logger = logging.getLogger(__name__)


def room_for(user_id: UserId | str) -> str:
    """Name of the room holding all connections of a user."""
    return f"user_{user_id}"


class Subscription:
    """One open connection of a user."""

    def __init__(self, user_id: UserId, queue_size: int) -> None:
        self.user_id = user_id
        self.room = room_for(user_id)
        self.queue: asyncio.Queue[dict[str, Any]] = asyncio.Queue(maxsize=queue_size)
        self.dropped = 0

    def offer(self, message: dict[str, Any]) -> bool:
        """Enqueue a message without waiting.

        Returns:
            False if the queue was full and the message was dropped
        """
        try:
            self.queue.put_nowait(message)
            return True
        except asyncio.QueueFull:
            self.dropped += 1
            return False

    async def receive(self) -> dict[str, Any]:
        """Wait for the next message."""
        return await self.queue.get()


class ConnectionHub(NotificationPublisher):
    """Routes events to the connections of a user.

    Delivery is at-most-once and only reaches connections open at publish
    time; the notification store is the durable record.
    """

    def __init__(self, queue_size: int = 100) -> None:
        self.queue_size = queue_size
        self._rooms: dict[str, set[Subscription]] = defaultdict(set)

    def subscribe(self, user_id: UserId) -> Subscription:
        subscription = Subscription(user_id, self.queue_size)
        self._rooms[subscription.room].add(subscription)
        logger.info(
            "Connection joined %s (%d open)",
            subscription.room,
            len(self._rooms[subscription.room]),
        )
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        members = self._rooms.get(subscription.room)
        if not members:
            return
        members.discard(subscription)
        if not members:
            del self._rooms[subscription.room]
        logger.info(
            "Connection left %s (dropped %d messages)",
            subscription.room,
            subscription.dropped,
        )

    def connection_count(self, user_id: UserId | None = None) -> int:
        """Open connections of one user, or of everyone."""
        if user_id is not None:
            return len(self._rooms.get(room_for(user_id), ()))
        return sum(len(members) for members in self._rooms.values())

    async def publish(self, user_id: UserId, event: str, data: dict[str, Any]) -> int:
        members = self._rooms.get(room_for(user_id))
        if not members:
            return 0

        message = {"event": event, "data": data}
        delivered = 0
        for subscription in list(members):
            if subscription.offer(message):
                delivered += 1
            else:
                logger.warning(
                    "Dropped %s event for slow connection in %s", event, subscription.room
                )
        return delivered
