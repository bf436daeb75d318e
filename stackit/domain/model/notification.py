"""Notification entity.

Notifications live in the recipient's inbox. They are created by the
notification service and afterwards only touched by the recipient.
"""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import NotificationId, NotificationKind, UserId


class Notification(DomainModel):
    """Notification entity."""

    id: NotificationId
    recipient_id: UserId
    kind: NotificationKind
    message: str = Field(min_length=1)
    link: str | None = None
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
