"""Notification routes.

Every route acts on the caller's own notifications only.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status

from stackit.application.usecase.notification import (
    ClearNotificationsRequest,
    ClearNotificationsResponse,
    ClearNotificationsUseCase,
    DeleteNotificationRequest,
    DeleteNotificationUseCase,
    GetNotificationRequest,
    GetNotificationStatsRequest,
    GetNotificationStatsResponse,
    GetNotificationStatsUseCase,
    GetNotificationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    MarkNotificationUnreadRequest,
    MarkNotificationUnreadUseCase,
    NotificationResponse,
)
from stackit.domain.error import DomainError
from stackit.domain.service import CredentialService
from stackit.interface.api.security import require_identity
from stackit.interface.error import to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    credential_service: FromDishka[CredentialService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first.

    Example:
        GET /notifications?page=1&limit=20&unreadOnly=true

        Response:
        {
            "notifications": [...],
            "page": 1,
            "limit": 20,
            "total": 3,
            "pages": 1,
            "has_next": false,
            "unread_count": 3
        }
    """
    identity = await require_identity(credential_service, authorization, auth_token)

    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=identity.user_id,
            page=page,
            limit=limit,
            unread_only=unread_only,
        )
    )


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    identity = await require_identity(credential_service, authorization, auth_token)
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(user_id=identity.user_id)
    )


@router.get("/stats", response_model=GetNotificationStatsResponse)
async def get_notification_stats(
    get_notification_stats_use_case: FromDishka[GetNotificationStatsUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetNotificationStatsResponse:
    """Per-type totals and unread counts for the caller."""
    identity = await require_identity(credential_service, authorization, auth_token)
    return await get_notification_stats_use_case.execute(
        GetNotificationStatsRequest(user_id=identity.user_id)
    )


@router.put("/read-all", response_model=MarkAllNotificationsReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> MarkAllNotificationsReadResponse:
    identity = await require_identity(credential_service, authorization, auth_token)
    return await mark_all_read_use_case.execute(
        MarkAllNotificationsReadRequest(user_id=identity.user_id)
    )


@router.delete("/clear", response_model=ClearNotificationsResponse)
async def clear_notifications(
    clear_notifications_use_case: FromDishka[ClearNotificationsUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ClearNotificationsResponse:
    """Delete all of the caller's notifications."""
    identity = await require_identity(credential_service, authorization, auth_token)
    return await clear_notifications_use_case.execute(
        ClearNotificationsRequest(user_id=identity.user_id)
    )


@router.get("/{notification_id}", response_model=NotificationResponse)
async def get_notification(
    notification_id: UUID,
    get_notification_use_case: FromDishka[GetNotificationUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> NotificationResponse:
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        return await get_notification_use_case.execute(
            GetNotificationRequest(
                notification_id=str(notification_id), user_id=identity.user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> NotificationResponse:
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        return await mark_read_use_case.execute(
            MarkNotificationReadRequest(
                notification_id=str(notification_id), user_id=identity.user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{notification_id}/unread", response_model=NotificationResponse)
async def mark_unread(
    notification_id: UUID,
    mark_unread_use_case: FromDishka[MarkNotificationUnreadUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> NotificationResponse:
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        return await mark_unread_use_case.execute(
            MarkNotificationUnreadRequest(
                notification_id=str(notification_id), user_id=identity.user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    credential_service: FromDishka[CredentialService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> None:
    identity = await require_identity(credential_service, authorization, auth_token)

    try:
        await delete_notification_use_case.execute(
            DeleteNotificationRequest(
                notification_id=str(notification_id), user_id=identity.user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
