"""Get notification stats use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType, UserId

from ..base import BaseUseCase


class GetNotificationStatsRequest(BaseModel):
    user_id: str  # User ID from authenticated user


class NotificationTypeCount(BaseModel):
    type: NotificationType
    count: int
    unread_count: int


class GetNotificationStatsResponse(BaseModel):
    """Per-type counts of the caller's live notifications."""

    stats: list[NotificationTypeCount]
    total: int
    unread_count: int


class GetNotificationStatsUseCase(BaseUseCase):
    """Use case for summarizing the caller's notifications by type."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: GetNotificationStatsRequest
    ) -> GetNotificationStatsResponse:
        stats = await self.notification_service.stats(UserId(UUID(request.user_id)))
        return GetNotificationStatsResponse(
            stats=[
                NotificationTypeCount(type=s.type, count=s.total, unread_count=s.unread)
                for s in stats
            ],
            total=sum(s.total for s in stats),
            unread_count=sum(s.unread for s in stats),
        )
