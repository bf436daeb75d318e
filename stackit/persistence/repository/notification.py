"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId
from stackit.persistence.mappers import notification_to_dict, row_to_notification
from stackit.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.read.is_(False))
        stmt = stmt.order_by(
            notifications_table.c.created_at.desc(), notifications_table.c.id
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification inside a SAVEPOINT.

        A failed insert only rolls back the savepoint, leaving the
        caller's transaction usable.
        """
        stmt = insert(notifications_table).values(
            **notification_to_dict(notification)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return notification

    async def mark_read(self, notification_id: NotificationId) -> None:
        """Set the read flag on a notification."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .values(read=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Set the read flag on a recipient's unread notifications."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.read.is_(False),
                )
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification."""
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_recipient(self, recipient_id: UserId) -> int:
        """Delete all of a recipient's notifications."""
        stmt = delete(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
