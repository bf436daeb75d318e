"""Mark notifications read use cases."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, Principal


class MarkReadRequest(BaseModel):
    """Mark one notification read request."""

    principal: Principal
    notification_id: str  # UUID string


class MarkReadResponse(BaseModel):
    """Mark one notification read response."""

    message: str


class MarkAllReadRequest(BaseModel):
    """Mark all notifications read request."""

    principal: Principal


class MarkAllReadResponse(BaseModel):
    """Mark all notifications read response."""

    message: str
    updated_count: int


class MarkReadUseCase(BaseUseCase[MarkReadRequest, MarkReadResponse]):
    """Use case for marking one of the caller's notifications read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        """Execute mark read flow.

        Marking an already-read notification succeeds again.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If it belongs to another user
        """
        await self.notification_service.mark_read(
            request.principal, NotificationId(UUID(request.notification_id))
        )
        return MarkReadResponse(message="Notification marked as read")


class MarkAllReadUseCase(BaseUseCase[MarkAllReadRequest, MarkAllReadResponse]):
    """Use case for marking the caller's whole inbox read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        """Execute mark all read flow."""
        updated = await self.notification_service.mark_all_read(request.principal)
        return MarkAllReadResponse(
            message="All notifications marked as read", updated_count=updated
        )
