"""Delete notification use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, UserId

from ..base import BaseUseCase


class DeleteNotificationRequest(BaseModel):
    """Delete notification request."""

    notification_id: str
    user_id: str  # User ID from authenticated user


class DeleteNotificationUseCase(BaseUseCase):
    """Use case for deleting one of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: DeleteNotificationRequest) -> None:
        """Execute delete.

        Raises:
            NotFoundError: If the notification does not exist or has expired
            NotAuthorizedError: If the caller is not the recipient
        """
        await self.notification_service.delete(
            NotificationId(UUID(request.notification_id)), UserId(UUID(request.user_id))
        )
