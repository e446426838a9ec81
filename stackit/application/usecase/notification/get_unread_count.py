"""Get unread count use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import UserId

from ..base import BaseUseCase


class GetUnreadCountRequest(BaseModel):
    user_id: str  # User ID from authenticated user


class GetUnreadCountResponse(BaseModel):
    unread_count: int


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for the caller's unread notification badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        count = await self.notification_service.unread_count(UserId(UUID(request.user_id)))
        return GetUnreadCountResponse(unread_count=count)
