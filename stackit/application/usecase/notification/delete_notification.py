"""Delete notifications use cases."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, Principal


class DeleteNotificationRequest(BaseModel):
    """Delete one notification request."""

    principal: Principal
    notification_id: str  # UUID string


class DeleteNotificationResponse(BaseModel):
    """Delete one notification response."""

    message: str


class ClearNotificationsRequest(BaseModel):
    """Delete all notifications request."""

    principal: Principal


class ClearNotificationsResponse(BaseModel):
    """Delete all notifications response."""

    message: str
    deleted_count: int


class DeleteNotificationUseCase(
    BaseUseCase[DeleteNotificationRequest, DeleteNotificationResponse]
):
    """Use case for deleting one of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteNotificationRequest
    ) -> DeleteNotificationResponse:
        """Execute delete notification flow.

        Raises:
            NotFoundError: If the notification does not exist (or was deleted)
            ForbiddenError: If it belongs to another user
        """
        await self.notification_service.delete(
            request.principal, NotificationId(UUID(request.notification_id))
        )
        return DeleteNotificationResponse(message="Notification deleted")


class ClearNotificationsUseCase(
    BaseUseCase[ClearNotificationsRequest, ClearNotificationsResponse]
):
    """Use case for emptying the caller's inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ClearNotificationsRequest
    ) -> ClearNotificationsResponse:
        """Execute clear notifications flow."""
        deleted = await self.notification_service.clear_all(request.principal)
        return ClearNotificationsResponse(
            message="All notifications cleared", deleted_count=deleted
        )
