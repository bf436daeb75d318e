"""List notifications use cases."""

from datetime import datetime

from pydantic import BaseModel

from stackit.domain.model import Notification
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationKind, Principal


class NotificationItem(BaseModel):
    """Notification item in response."""

    notification_id: str
    kind: NotificationKind
    message: str
    link: str | None
    read: bool
    created_at: datetime

    @classmethod
    def from_model(cls, notification: Notification) -> "NotificationItem":
        return cls(
            notification_id=str(notification.id),
            kind=notification.kind,
            message=notification.message,
            link=notification.link,
            read=notification.read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    principal: Principal


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int
    total_count: int


class ListUnreadNotificationsResponse(BaseModel):
    """List unread notifications response."""

    notifications: list[NotificationItem]
    count: int


class ListNotificationsUseCase:
    """Use case for reading the caller's whole inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Args:
            request: List notifications request

        Returns:
            Notifications newest first with unread and total counts
        """
        notifications = await self.notification_service.list_notifications(
            request.principal.user_id
        )
        return ListNotificationsResponse(
            notifications=[NotificationItem.from_model(n) for n in notifications],
            unread_count=sum(1 for n in notifications if not n.read),
            total_count=len(notifications),
        )


class ListUnreadNotificationsUseCase:
    """Use case for reading the caller's unread notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListUnreadNotificationsResponse:
        """Execute list unread notifications flow."""
        notifications = await self.notification_service.list_notifications(
            request.principal.user_id, unread_only=True
        )
        return ListUnreadNotificationsResponse(
            notifications=[NotificationItem.from_model(n) for n in notifications],
            count=len(notifications),
        )
