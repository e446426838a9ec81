"""In-memory notification repository for testing."""

from collections import Counter
from datetime import datetime
from typing import Optional

from stackit.domain.model.notification import Notification
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.value import NotificationId, NotificationType, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    def _live(
        self, recipient_id: UserId, now: datetime, unread_only: bool = False
    ) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id
            and not n.is_expired(now)
            and not (unread_only and n.is_read)
        ]

    async def save(self, notification: Notification) -> Notification:
        self._notifications[notification.id] = notification
        return notification

    async def find_by_id(
        self, notification_id: NotificationId, now: datetime
    ) -> Optional[Notification]:
        notification = self._notifications.get(notification_id)
        if notification and not notification.is_expired(now):
            return notification
        return None

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        now: datetime,
        limit: int,
        offset: int,
        unread_only: bool = False,
    ) -> list[Notification]:
        items = sorted(
            self._live(recipient_id, now, unread_only),
            key=lambda n: n.created_at,
            reverse=True,
        )
        return items[offset : offset + limit]

    async def count_by_recipient(
        self, recipient_id: UserId, now: datetime, unread_only: bool = False
    ) -> int:
        return len(self._live(recipient_id, now, unread_only))

    async def count_by_type(
        self, recipient_id: UserId, now: datetime
    ) -> dict[NotificationType, tuple[int, int]]:
        live = self._live(recipient_id, now)
        totals = Counter(n.type for n in live)
        unread = Counter(n.type for n in live if not n.is_read)
        return {t: (totals[t], unread[t]) for t in totals}

    async def set_read(self, notification_id: NotificationId, is_read: bool) -> None:
        notification = self._notifications.get(notification_id)
        if notification:
            self._notifications[notification_id] = notification.model_copy(
                update={"is_read": is_read}
            )

    async def mark_all_read(self, recipient_id: UserId, now: datetime) -> int:
        unread = self._live(recipient_id, now, unread_only=True)
        for n in unread:
            self._notifications[n.id] = n.model_copy(update={"is_read": True})
        return len(unread)

    async def delete(self, notification_id: NotificationId) -> None:
        self._notifications.pop(notification_id, None)

    async def delete_by_recipient(self, recipient_id: UserId) -> int:
        ids = [n.id for n in self._notifications.values() if n.recipient_id == recipient_id]
        for nid in ids:
            del self._notifications[nid]
        return len(ids)

    async def delete_expired(self, now: datetime) -> int:
        ids = [n.id for n in self._notifications.values() if n.is_expired(now)]
        for nid in ids:
            del self._notifications[nid]
        return len(ids)
