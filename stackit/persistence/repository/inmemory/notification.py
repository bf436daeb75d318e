"""In-memory notification repository for testing."""

from typing import Optional

from stackit.domain.model.notification import Notification
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first."""
        notifications = [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.read)
        ]
        # Insertion order reversed breaks created_at ties newest first
        notifications.reverse()
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_read(self, notification_id: NotificationId) -> None:
        """Set the read flag on a notification."""
        notification = self._notifications.get(notification_id)
        if notification is not None:
            self._notifications[notification_id] = notification.model_copy(
                update={"read": True}
            )

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Set the read flag on a recipient's unread notifications."""
        changed = 0
        for nid, notification in self._notifications.items():
            if notification.recipient_id == recipient_id and not notification.read:
                self._notifications[nid] = notification.model_copy(
                    update={"read": True}
                )
                changed += 1
        return changed

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification."""
        return self._notifications.pop(notification_id, None) is not None

    async def delete_by_recipient(self, recipient_id: UserId) -> int:
        """Delete all of a recipient's notifications."""
        doomed = [
            nid
            for nid, n in self._notifications.items()
            if n.recipient_id == recipient_id
        ]
        for nid in doomed:
            del self._notifications[nid]
        return len(doomed)
