"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService, UserService
from stackit.domain.value import UserId

from ..base import BaseUseCase


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # User ID resolved from the request credential


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    username: str
    email: str | None
    avatar_url: str | None
    reputation: int
    unread_notifications: int
    created_at: datetime


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the authenticated user's profile."""

    def __init__(
        self,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        unread = await self.notification_service.unread_count(user.id)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email,
            avatar_url=user.avatar_url,
            reputation=user.reputation,
            unread_notifications=unread,
            created_at=user.created_at,
        )
