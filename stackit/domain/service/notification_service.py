"""Notification record store service."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import uuid4

import logfire

from stackit.config import NotificationSettings
from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import Notification
from stackit.domain.model.common import utcnow
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

from .base import Service


@dataclass
class NotificationPage:
    """One page of a recipient's notifications."""

    items: list[Notification]
    page: int
    page_size: int
    total: int
    unread_count: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.pages


@dataclass
class NotificationTypeStats:
    """Live notification counts for one type."""

    type: NotificationType
    total: int
    unread: int


class NotificationService(Service):
    """Domain service owning notification records.

    Every read filters out notifications whose expiry has passed, whether or
    not the background purge has removed them yet. Every per-notification
    operation checks that the caller is the recipient.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        settings: NotificationSettings,
    ) -> None:
        self.notification_repository = notification_repository
        self.settings = settings

    @property
    def ttl(self) -> timedelta:
        return timedelta(days=self.settings.ttl_days)

    async def create(
        self,
        type: NotificationType,
        recipient_id: UserId,
        sender_id: UserId,
        question_id: Optional[QuestionId] = None,
        answer_id: Optional[AnswerId] = None,
        comment_id: Optional[CommentId] = None,
        content: Optional[str] = None,
        username: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> Notification:
        """Persist a new unread notification.

        Content falls back to the type's template when empty; the record
        expires ``ttl_days`` after ``now``.
        """
        now = now or utcnow()
        with logfire.span(
            "notification_service.create",
            type=type.value,
            recipient_id=str(recipient_id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                type=type,
                recipient_id=recipient_id,
                sender_id=sender_id,
                question_id=question_id,
                answer_id=answer_id,
                comment_id=comment_id,
                content=content or type.default_content,
                username=username,
                metadata=metadata or {},
                created_at=now,
                expires_at=now + self.ttl,
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification stored",
                notification_id=str(saved.id),
                type=type.value,
                recipient_id=str(recipient_id),
            )
            return saved

    async def list_for_recipient(
        self,
        recipient_id: UserId,
        page: int = 1,
        page_size: Optional[int] = None,
        unread_only: bool = False,
        now: Optional[datetime] = None,
    ) -> NotificationPage:
        """A page of a recipient's live notifications, newest first.

        ``page`` is 1-based; ``page_size`` is clamped to the configured maximum.
        """
        now = now or utcnow()
        page = max(page, 1)
        page_size = page_size or self.settings.default_page_size
        page_size = min(max(page_size, 1), self.settings.max_page_size)

        with logfire.span(
            "notification_service.list_for_recipient",
            recipient_id=str(recipient_id),
            page=page,
            unread_only=unread_only,
        ):
            items = await self.notification_repository.find_by_recipient(
                recipient_id,
                now,
                limit=page_size,
                offset=(page - 1) * page_size,
                unread_only=unread_only,
            )
            total = await self.notification_repository.count_by_recipient(
                recipient_id, now, unread_only=unread_only
            )
            unread = await self.notification_repository.count_by_recipient(
                recipient_id, now, unread_only=True
            )
            return NotificationPage(
                items=items,
                page=page,
                page_size=page_size,
                total=total,
                unread_count=unread,
            )

    async def get(
        self,
        notification_id: NotificationId,
        user_id: UserId,
        now: Optional[datetime] = None,
    ) -> Notification:
        """Get one of the caller's live notifications.

        Raises:
            NotFoundError: If the notification does not exist or has expired
            NotAuthorizedError: If the caller is not the recipient
        """
        now = now or utcnow()
        with logfire.span(
            "notification_service.get",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id, now
            )
            if not notification:
                raise NotFoundError("Notification", str(notification_id))
            if notification.recipient_id != user_id:
                logfire.warn(
                    "Notification access denied",
                    notification_id=str(notification_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "access", "notification", str(notification_id), str(user_id)
                )
            return notification

    async def mark_read(
        self,
        notification_id: NotificationId,
        user_id: UserId,
        now: Optional[datetime] = None,
    ) -> Notification:
        """Mark one of the caller's notifications as read. Idempotent."""
        return await self._set_read(notification_id, user_id, True, now)

    async def mark_unread(
        self,
        notification_id: NotificationId,
        user_id: UserId,
        now: Optional[datetime] = None,
    ) -> Notification:
        return await self._set_read(notification_id, user_id, False, now)

    async def mark_all_read(self, user_id: UserId, now: Optional[datetime] = None) -> int:
        """Mark all of the caller's live notifications as read.

        Returns:
            Number of notifications changed
        """
        now = now or utcnow()
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            count = await self.notification_repository.mark_all_read(user_id, now)
            logfire.info("Notifications marked read", user_id=str(user_id), count=count)
            return count

    async def unread_count(self, user_id: UserId, now: Optional[datetime] = None) -> int:
        now = now or utcnow()
        return await self.notification_repository.count_by_recipient(
            user_id, now, unread_only=True
        )

    async def stats(
        self, user_id: UserId, now: Optional[datetime] = None
    ) -> list[NotificationTypeStats]:
        """Per-type totals of the caller's live notifications, busiest first."""
        now = now or utcnow()
        with logfire.span("notification_service.stats", user_id=str(user_id)):
            counts = await self.notification_repository.count_by_type(user_id, now)
            stats = [
                NotificationTypeStats(type=t, total=total, unread=unread)
                for t, (total, unread) in counts.items()
            ]
            return sorted(stats, key=lambda s: (-s.total, s.type.value))

    async def delete(
        self,
        notification_id: NotificationId,
        user_id: UserId,
        now: Optional[datetime] = None,
    ) -> None:
        """Delete one of the caller's notifications."""
        notification = await self.get(notification_id, user_id, now)
        with logfire.span("notification_service.delete", notification_id=str(notification_id)):
            await self.notification_repository.delete(notification.id)
            logfire.info("Notification deleted", notification_id=str(notification_id))

    async def clear(self, user_id: UserId) -> int:
        """Delete all of the caller's notifications.

        Returns:
            Number of notifications deleted
        """
        with logfire.span("notification_service.clear", user_id=str(user_id)):
            count = await self.notification_repository.delete_by_recipient(user_id)
            logfire.info("Notifications cleared", user_id=str(user_id), count=count)
            return count

    async def purge_expired(self, now: Optional[datetime] = None) -> int:
        """Physically remove expired notifications.

        Reads already hide them; this only reclaims storage.
        """
        now = now or utcnow()
        with logfire.span("notification_service.purge_expired"):
            count = await self.notification_repository.delete_expired(now)
            logfire.info("Expired notifications purged", count=count)
            return count

    async def _set_read(
        self,
        notification_id: NotificationId,
        user_id: UserId,
        is_read: bool,
        now: Optional[datetime],
    ) -> Notification:
        notification = await self.get(notification_id, user_id, now)
        with logfire.span(
            "notification_service.set_read",
            notification_id=str(notification_id),
            is_read=is_read,
        ):
            if notification.is_read != is_read:
                await self.notification_repository.set_read(notification.id, is_read)
            return notification.model_copy(update={"is_read": is_read})
