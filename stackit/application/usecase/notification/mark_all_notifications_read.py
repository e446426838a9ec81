"""Mark all notifications read use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import UserId

from ..base import BaseUseCase


class MarkAllNotificationsReadRequest(BaseModel):
    user_id: str  # User ID from authenticated user


class MarkAllNotificationsReadResponse(BaseModel):
    updated: int


class MarkAllNotificationsReadUseCase(BaseUseCase):
    """Use case for marking every live notification of the caller as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        updated = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllNotificationsReadResponse(updated=updated)
