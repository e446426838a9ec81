"""Notification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from stackit.domain.model.notification import Notification
from stackit.domain.value import NotificationId, NotificationType, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Every read takes ``now`` and must hide notifications whose
    ``expires_at`` is not after it, whether or not they have been purged.
    """

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Persist a new notification.

        A failure here must leave the caller's surrounding unit of work
        usable (the PostgreSQL implementation writes inside a savepoint).
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId, now: datetime
    ) -> Optional[Notification]:
        """Find a live notification by ID."""
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        now: datetime,
        limit: int,
        offset: int,
        unread_only: bool = False,
    ) -> list[Notification]:
        """Find a recipient's live notifications, newest first.

        Args:
            recipient_id: Owner of the notifications
            now: Reference time for expiry
            limit: Page size
            offset: Number of notifications to skip
            unread_only: Only return unread notifications

        Returns:
            Page of notifications
        """
        pass

    @abstractmethod
    async def count_by_recipient(
        self, recipient_id: UserId, now: datetime, unread_only: bool = False
    ) -> int:
        """Count a recipient's live notifications."""
        pass

    @abstractmethod
    async def count_by_type(
        self, recipient_id: UserId, now: datetime
    ) -> dict[NotificationType, tuple[int, int]]:
        """Per-type (total, unread) counts of a recipient's live notifications."""
        pass

    @abstractmethod
    async def set_read(self, notification_id: NotificationId, is_read: bool) -> None:
        """Set the read flag of a notification."""
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId, now: datetime) -> int:
        """Mark every live unread notification of a recipient read.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> None:
        """Delete a notification."""
        pass

    @abstractmethod
    async def delete_by_recipient(self, recipient_id: UserId) -> int:
        """Delete all notifications of a recipient.

        Returns:
            Number of notifications deleted
        """
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete every notification expired at ``now``.

        Returns:
            Number of notifications deleted
        """
        pass
