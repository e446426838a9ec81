"""Notification use cases."""

from .clear_notifications import (
    ClearNotificationsRequest,
    ClearNotificationsResponse,
    ClearNotificationsUseCase,
)
from .delete_notification import DeleteNotificationRequest, DeleteNotificationUseCase
from .get_notification import (
    GetNotificationRequest,
    GetNotificationUseCase,
    NotificationResponse,
)
from .get_notification_stats import (
    GetNotificationStatsRequest,
    GetNotificationStatsResponse,
    GetNotificationStatsUseCase,
    NotificationTypeCount,
)
from .get_unread_count import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
)
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .mark_all_notifications_read import (
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
)
from .mark_notification_read import (
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from .mark_notification_unread import (
    MarkNotificationUnreadRequest,
    MarkNotificationUnreadUseCase,
)

__all__ = [
    "ClearNotificationsRequest",
    "ClearNotificationsResponse",
    "ClearNotificationsUseCase",
    "DeleteNotificationRequest",
    "DeleteNotificationUseCase",
    "GetNotificationRequest",
    "GetNotificationStatsRequest",
    "GetNotificationStatsResponse",
    "GetNotificationStatsUseCase",
    "GetNotificationUseCase",
    "GetUnreadCountRequest",
    "GetUnreadCountResponse",
    "GetUnreadCountUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadRequest",
    "MarkAllNotificationsReadResponse",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadUseCase",
    "MarkNotificationUnreadRequest",
    "MarkNotificationUnreadUseCase",
    "NotificationResponse",
    "NotificationTypeCount",
]
