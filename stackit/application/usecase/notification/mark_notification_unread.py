"""Mark notification unread use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, UserId

from ..base import BaseUseCase
from .get_notification import NotificationResponse


class MarkNotificationUnreadRequest(BaseModel):
    """Mark notification unread request."""

    notification_id: str
    user_id: str  # User ID from authenticated user


class MarkNotificationUnreadUseCase(BaseUseCase):
    """Use case for flagging a notification as unread again."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkNotificationUnreadRequest) -> NotificationResponse:
        notification = await self.notification_service.mark_unread(
            NotificationId(UUID(request.notification_id)), UserId(UUID(request.user_id))
        )
        return NotificationResponse.from_notification(notification)
