"""List notifications use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from stackit.domain.service import NotificationService
from stackit.domain.value import UserId

from ..base import BaseUseCase
from .get_notification import NotificationResponse


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # User ID from authenticated user
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)
    unread_only: bool = False


class ListNotificationsResponse(BaseModel):
    """A page of notifications plus the caller's unread count."""

    notifications: list[NotificationResponse]
    page: int
    limit: int
    total: int
    pages: int
    has_next: bool
    unread_count: int


class ListNotificationsUseCase(BaseUseCase):
    """Use case for paging through the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: ListNotificationsRequest) -> ListNotificationsResponse:
        result = await self.notification_service.list_for_recipient(
            UserId(UUID(request.user_id)),
            page=request.page,
            page_size=request.limit,
            unread_only=request.unread_only,
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationResponse.from_notification(n) for n in result.items
            ],
            page=result.page,
            limit=result.page_size,
            total=result.total,
            pages=result.pages,
            has_next=result.has_next,
            unread_count=result.unread_count,
        )
