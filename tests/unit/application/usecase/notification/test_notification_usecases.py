"""Unit tests for notification use cases."""

import pytest

from stackit.application.usecase.notification import (
    ClearNotificationsRequest,
    ClearNotificationsUseCase,
    DeleteNotificationRequest,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
    ListUnreadNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadUseCase,
    MarkReadRequest,
    MarkReadUseCase,
)
from stackit.domain.error import NotFoundError
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationKind
from tests.conftest import make_principal
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInboxUseCases:
    @pytest.mark.asyncio
    async def test_counts_follow_read_state(self, unit_env):
        # Arrange
        service = await unit_env.get(NotificationService)
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        unread_use_case = await unit_env.get(ListUnreadNotificationsUseCase)
        mark_read_use_case = await unit_env.get(MarkReadUseCase)
        mark_all_use_case = await unit_env.get(MarkAllReadUseCase)

        me = make_principal()
        first = await service.notify(
            me.user_id, NotificationKind.QUESTION_ANSWERED, "one"
        )
        await service.notify(me.user_id, NotificationKind.ANSWER_ACCEPTED, "two")
        await service.notify(me.user_id, NotificationKind.PLATFORM_MESSAGE, "three")

        # Act
        await mark_read_use_case.execute(
            MarkReadRequest(principal=me, notification_id=str(first.id))
        )
        listing = await list_use_case.execute(ListNotificationsRequest(principal=me))
        unread = await unread_use_case.execute(ListNotificationsRequest(principal=me))
        mark_all = await mark_all_use_case.execute(MarkAllReadRequest(principal=me))

        # Assert
        assert listing.total_count == 3
        assert listing.unread_count == 2
        assert [n.message for n in listing.notifications] == ["three", "two", "one"]
        assert unread.count == 2
        assert mark_all.updated_count == 2

    @pytest.mark.asyncio
    async def test_delete_and_clear(self, unit_env):
        service = await unit_env.get(NotificationService)
        delete_use_case = await unit_env.get(DeleteNotificationUseCase)
        clear_use_case = await unit_env.get(ClearNotificationsUseCase)

        me = make_principal()
        n1 = await service.notify(me.user_id, NotificationKind.ANSWER_ACCEPTED, "a")
        await service.notify(me.user_id, NotificationKind.ANSWER_ACCEPTED, "b")

        deleted = await delete_use_case.execute(
            DeleteNotificationRequest(principal=me, notification_id=str(n1.id))
        )
        assert deleted.message == "Notification deleted"

        with pytest.raises(NotFoundError):
            await delete_use_case.execute(
                DeleteNotificationRequest(principal=me, notification_id=str(n1.id))
            )

        cleared = await clear_use_case.execute(ClearNotificationsRequest(principal=me))
        assert cleared.deleted_count == 1
