"""Notification domain service.

Appends entries to a recipient's inbox when answers are submitted or
accepted, and exposes the inbox to its owner. Delivery is pull-only: the
client polls the inbox.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model.notification import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, NotificationKind, Principal, UserId

from .authorization_service import AuthorizationService
from .base import Service


class NotificationService(Service):
    """Domain service for notification operations."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            authorization_service: Authorization domain service
        """
        self.notification_repository = notification_repository
        self.authorization_service = authorization_service

    async def notify(
        self,
        recipient_id: UserId,
        kind: NotificationKind,
        message: str,
        link: str | None = None,
    ) -> Notification:
        """Append an unread notification to a recipient's inbox.

        Identical events are not deduplicated.

        Args:
            recipient_id: Recipient user ID
            kind: Notification kind
            message: Human-readable message
            link: Optional link to the related page

        Returns:
            Created notification
        """
        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            kind=kind.value,
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                kind=kind,
                message=message,
                link=link,
                read=False,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
                kind=kind.value,
            )
            return saved

    async def notify_best_effort(
        self,
        recipient_id: UserId,
        kind: NotificationKind,
        message: str,
        link: str | None = None,
    ) -> Notification | None:
        """Notify, logging and swallowing any delivery failure.

        Used as a side effect of answer submission and acceptance, which
        must succeed even when the inbox write fails. Failures are not
        retried.

        Returns:
            Created notification, None if delivery failed
        """
        try:
            return await self.notify(recipient_id, kind, message, link)
        except Exception as e:
            logfire.error(
                "Notification delivery failed",
                recipient_id=str(recipient_id),
                kind=kind.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    async def list_notifications(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> list[Notification]:
        """List a recipient's notifications, newest first.

        Args:
            recipient_id: Recipient user ID
            unread_only: Only include unread notifications

        Returns:
            Notifications, newest first
        """
        with logfire.span(
            "notification_service.list_notifications",
            recipient_id=str(recipient_id),
            unread_only=unread_only,
        ):
            notifications = await self.notification_repository.find_by_recipient(
                recipient_id, unread_only=unread_only
            )
            logfire.info(
                "Notifications retrieved",
                recipient_id=str(recipient_id),
                count=len(notifications),
            )
            return notifications

    async def mark_read(
        self, principal: Principal, notification_id: NotificationId
    ) -> Notification:
        """Mark one of the principal's notifications as read.

        Marking an already-read notification succeeds without change.

        Args:
            principal: Acting principal (must be the recipient)
            notification_id: Notification ID

        Returns:
            The notification in its read state

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If it belongs to another user
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(principal.user_id),
        ):
            notification = await self._get_owned(principal, notification_id, "read")
            if notification.read:
                return notification

            await self.notification_repository.mark_read(notification_id)
            logfire.info(
                "Notification marked as read", notification_id=str(notification_id)
            )
            return notification.model_copy(update={"read": True})

    async def mark_all_read(self, principal: Principal) -> int:
        """Mark all of the principal's notifications as read.

        Args:
            principal: Acting principal

        Returns:
            Number of notifications that were unread
        """
        with logfire.span(
            "notification_service.mark_all_read", user_id=str(principal.user_id)
        ):
            updated = await self.notification_repository.mark_all_read(
                principal.user_id
            )
            logfire.info(
                "All notifications marked as read",
                user_id=str(principal.user_id),
                updated_count=updated,
            )
            return updated

    async def delete(
        self, principal: Principal, notification_id: NotificationId
    ) -> None:
        """Delete one of the principal's notifications.

        Args:
            principal: Acting principal (must be the recipient)
            notification_id: Notification ID

        Raises:
            NotFoundError: If the notification does not exist (including
                when it was already deleted)
            ForbiddenError: If it belongs to another user
        """
        with logfire.span(
            "notification_service.delete",
            notification_id=str(notification_id),
            user_id=str(principal.user_id),
        ):
            await self._get_owned(principal, notification_id, "delete")
            if not await self.notification_repository.delete(notification_id):
                # Deleted concurrently between lookup and delete
                raise NotFoundError("Notification", str(notification_id))
            logfire.info("Notification deleted", notification_id=str(notification_id))

    async def clear_all(self, principal: Principal) -> int:
        """Delete all of the principal's notifications.

        Args:
            principal: Acting principal

        Returns:
            Number of deleted notifications
        """
        with logfire.span(
            "notification_service.clear_all", user_id=str(principal.user_id)
        ):
            deleted = await self.notification_repository.delete_by_recipient(
                principal.user_id
            )
            logfire.info(
                "All notifications cleared",
                user_id=str(principal.user_id),
                deleted_count=deleted,
            )
            return deleted

    async def _get_owned(
        self, principal: Principal, notification_id: NotificationId, action: str
    ) -> Notification:
        """Load a notification and check the principal is its recipient."""
        notification = await self.notification_repository.find_by_id(notification_id)
        if notification is None:
            logfire.warn("Notification not found", notification_id=str(notification_id))
            raise NotFoundError("Notification", str(notification_id))

        self.authorization_service.ensure_owner(
            principal,
            action=action,
            resource="notification",
            resource_id=str(notification_id),
            owner_id=notification.recipient_id,
        )
        return notification
