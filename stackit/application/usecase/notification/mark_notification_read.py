"""Mark notification read use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, UserId

from ..base import BaseUseCase
from .get_notification import NotificationResponse


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str
    user_id: str  # User ID from authenticated user


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking one notification as read. Idempotent."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationResponse:
        """Execute mark read.

        Raises:
            NotFoundError: If the notification does not exist or has expired
            NotAuthorizedError: If the caller is not the recipient
        """
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)), UserId(UUID(request.user_id))
        )
        return NotificationResponse.from_notification(notification)
