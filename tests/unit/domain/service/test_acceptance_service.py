"""Unit tests for AcceptanceService."""

from uuid import uuid4

import pytest

from stackit.domain.error import (
    AlreadyAcceptedError,
    ForbiddenError,
    NotFoundError,
    ReferentialMismatchError,
)
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from stackit.domain.service import AcceptanceService
from stackit.domain.value import AnswerId, NotificationKind, QuestionId, Role
from tests.conftest import make_principal, seed_answer, seed_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _question_with_two_answers(unit_env):
    """q1 by u1, a1 by u2, a2 by u3."""
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)

    u1, u2, u3 = make_principal(), make_principal(), make_principal()
    q1 = await seed_question(question_repo, u1.user_id)
    a1 = await seed_answer(answer_repo, question_repo, q1, u2.user_id)
    a2 = await seed_answer(
        answer_repo, question_repo, q1, u3.user_id, offset_seconds=1
    )
    return u1, u2, u3, q1, a1, a2


class TestAcceptAnswer:
    """Tests for accept_answer."""

    @pytest.mark.asyncio
    async def test_author_accepts_and_answer_author_is_notified(self, unit_env):
        """Accepting sets the answer and notifies only its author."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        u1, u2, u3, q1, a1, _ = await _question_with_two_answers(unit_env)

        # Act
        result = await acceptance_service.accept_answer(q1.id, a1.id, u1)

        # Assert
        assert result.accepted_answer_id == a1.id
        stored = await question_repo.find_by_id(q1.id)
        assert stored.accepted_answer_id == a1.id

        u2_inbox = await notification_repo.find_by_recipient(u2.user_id)
        assert len(u2_inbox) == 1
        assert u2_inbox[0].kind == NotificationKind.ANSWER_ACCEPTED
        assert u2_inbox[0].message == "Your answer was accepted!"
        assert u2_inbox[0].link == f"/questions/{q1.id}"
        assert u2_inbox[0].read is False

        assert await notification_repo.find_by_recipient(u3.user_id) == []

    @pytest.mark.asyncio
    async def test_second_acceptance_fails(self, unit_env):
        """Acceptance is one-shot; the first answer stays accepted."""
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        u1, _, _, q1, a1, a2 = await _question_with_two_answers(unit_env)

        await acceptance_service.accept_answer(q1.id, a1.id, u1)

        with pytest.raises(AlreadyAcceptedError):
            await acceptance_service.accept_answer(q1.id, a2.id, u1)

        stored = await question_repo.find_by_id(q1.id)
        assert stored.accepted_answer_id == a1.id

    @pytest.mark.asyncio
    async def test_reaccepting_same_answer_fails(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        u1, _, _, q1, a1, _ = await _question_with_two_answers(unit_env)

        await acceptance_service.accept_answer(q1.id, a1.id, u1)

        with pytest.raises(AlreadyAcceptedError):
            await acceptance_service.accept_answer(q1.id, a1.id, u1)

    @pytest.mark.asyncio
    async def test_answer_author_cannot_accept(self, unit_env):
        """Only the question author may accept, not the answer author."""
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        _, u2, _, q1, a1, _ = await _question_with_two_answers(unit_env)

        with pytest.raises(ForbiddenError):
            await acceptance_service.accept_answer(q1.id, a1.id, u2)

        stored = await question_repo.find_by_id(q1.id)
        assert stored.accepted_answer_id is None
        assert await notification_repo.find_by_recipient(u2.user_id) == []

    @pytest.mark.asyncio
    async def test_admin_role_gives_no_bypass(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        _, _, _, q1, a1, _ = await _question_with_two_answers(unit_env)

        with pytest.raises(ForbiddenError):
            await acceptance_service.accept_answer(
                q1.id, a1.id, make_principal(Role.ADMIN)
            )

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await acceptance_service.accept_answer(
                QuestionId(uuid4()), AnswerId(uuid4()), make_principal()
            )

    @pytest.mark.asyncio
    async def test_missing_answer_raises_not_found(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        u1, _, _, q1, _, _ = await _question_with_two_answers(unit_env)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await acceptance_service.accept_answer(q1.id, AnswerId(uuid4()), u1)

    @pytest.mark.asyncio
    async def test_answer_of_other_question_raises_mismatch(self, unit_env):
        """The mismatch check runs before the ownership check."""
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        u1, _, _, q1, _, _ = await _question_with_two_answers(unit_env)

        other = await seed_question(question_repo, make_principal().user_id)
        foreign = await seed_answer(
            answer_repo, question_repo, other, make_principal().user_id
        )

        with pytest.raises(ReferentialMismatchError):
            await acceptance_service.accept_answer(q1.id, foreign.id, u1)

        # Even a non-author gets the mismatch, not Forbidden
        with pytest.raises(ReferentialMismatchError):
            await acceptance_service.accept_answer(
                q1.id, foreign.id, make_principal()
            )

    @pytest.mark.asyncio
    async def test_accepting_own_answer_sends_no_notification(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        author = make_principal()
        question = await seed_question(question_repo, author.user_id)
        own = await seed_answer(answer_repo, question_repo, question, author.user_id)

        await acceptance_service.accept_answer(question.id, own.id, author)

        assert await notification_repo.find_by_recipient(author.user_id) == []

    @pytest.mark.asyncio
    async def test_lost_race_raises_already_accepted(self, unit_env, monkeypatch):
        """A stale read that loses the compare-and-swap fails cleanly."""
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        u1, u2, u3, q1, a1, a2 = await _question_with_two_answers(unit_env)

        # Snapshot taken before the competing request commits
        stale = await question_repo.find_by_id(q1.id)
        await acceptance_service.accept_answer(q1.id, a1.id, u1)

        async def stale_find_by_id(question_id):
            return stale

        monkeypatch.setattr(question_repo, "find_by_id", stale_find_by_id)

        with pytest.raises(AlreadyAcceptedError):
            await acceptance_service.accept_answer(q1.id, a2.id, u1)

        monkeypatch.undo()
        stored = await question_repo.find_by_id(q1.id)
        assert stored.accepted_answer_id == a1.id
        assert await notification_repo.find_by_recipient(u3.user_id) == []

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_acceptance(
        self, unit_env, monkeypatch
    ):
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        u1, _, _, q1, a1, _ = await _question_with_two_answers(unit_env)

        async def broken_save(notification):
            raise RuntimeError("inbox unavailable")

        monkeypatch.setattr(notification_repo, "save", broken_save)

        result = await acceptance_service.accept_answer(q1.id, a1.id, u1)

        assert result.accepted_answer_id == a1.id
        stored = await question_repo.find_by_id(q1.id)
        assert stored.accepted_answer_id == a1.id
