"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from stackit.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from stackit.domain.error import DomainError
from stackit.domain.service import CredentialService
from stackit.interface.api.security import require_identity
from stackit.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the authenticated user.

    Example:
        GET /users/me
        Cookie: auth_token=...

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "username": "alice",
            "email": null,
            "avatar_url": null,
            "reputation": 42,
            "unread_notifications": 3,
            "created_at": "2025-01-15T12:34:56Z"
        }
    """
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=identity.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
