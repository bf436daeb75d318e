"""Notification use cases."""

from .delete_notification import (
    ClearNotificationsRequest,
    ClearNotificationsResponse,
    ClearNotificationsUseCase,
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
)
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    ListUnreadNotificationsResponse,
    ListUnreadNotificationsUseCase,
    NotificationItem,
)
from .mark_read import (
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)

__all__ = [
    "ClearNotificationsRequest",
    "ClearNotificationsResponse",
    "ClearNotificationsUseCase",
    "DeleteNotificationRequest",
    "DeleteNotificationResponse",
    "DeleteNotificationUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "ListUnreadNotificationsResponse",
    "ListUnreadNotificationsUseCase",
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "MarkAllReadUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
    "NotificationItem",
]
