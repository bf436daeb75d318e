"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.notification import Notification
from stackit.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Notifications are stored one row per entry and looked up by
    recipient, so unrelated events never rewrite the same record.
    """

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first.

        Args:
            recipient_id: The recipient's user ID
            unread_only: Only return notifications not yet read

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> None:
        """Set the read flag on a notification.

        Args:
            notification_id: The notification ID
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Set the read flag on all of a recipient's unread notifications.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            Number of notifications that changed state
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification.

        Args:
            notification_id: The notification ID

        Returns:
            True if deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def delete_by_recipient(self, recipient_id: UserId) -> int:
        """Delete all of a recipient's notifications.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            Number of deleted notifications
        """
        pass
