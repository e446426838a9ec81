"""Get notification use case."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.model import Notification
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, NotificationType, UserId

from ..base import BaseUseCase


class GetNotificationRequest(BaseModel):
    """Get notification request."""

    notification_id: str
    user_id: str  # User ID from authenticated user


class NotificationResponse(BaseModel):
    """Notification details."""

    notification_id: str
    type: NotificationType
    sender_id: str
    username: str | None
    content: str
    question_id: str | None
    answer_id: str | None
    comment_id: str | None
    metadata: dict[str, Any]
    is_read: bool
    created_at: datetime
    expires_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        def _opt(value: UUID | None) -> str | None:
            return str(value) if value else None

        assert notification.expires_at is not None
        return cls(
            notification_id=str(notification.id),
            type=notification.type,
            sender_id=str(notification.sender_id),
            username=notification.username,
            content=notification.content,
            question_id=_opt(notification.question_id),
            answer_id=_opt(notification.answer_id),
            comment_id=_opt(notification.comment_id),
            metadata=notification.metadata,
            is_read=notification.is_read,
            created_at=notification.created_at,
            expires_at=notification.expires_at,
        )


class GetNotificationUseCase(BaseUseCase):
    """Use case for reading one of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetNotificationRequest) -> NotificationResponse:
        """Execute get notification flow.

        Raises:
            NotFoundError: If the notification does not exist or has expired
            NotAuthorizedError: If the caller is not the recipient
        """
        notification = await self.notification_service.get(
            NotificationId(UUID(request.notification_id)), UserId(UUID(request.user_id))
        )
        return NotificationResponse.from_notification(notification)
