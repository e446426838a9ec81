"""Clear notifications use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import UserId

from ..base import BaseUseCase


class ClearNotificationsRequest(BaseModel):
    user_id: str  # User ID from authenticated user


class ClearNotificationsResponse(BaseModel):
    deleted: int


class ClearNotificationsUseCase(BaseUseCase):
    """Use case for deleting all of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: ClearNotificationsRequest) -> ClearNotificationsResponse:
        deleted = await self.notification_service.clear(UserId(UUID(request.user_id)))
        return ClearNotificationsResponse(deleted=deleted)
