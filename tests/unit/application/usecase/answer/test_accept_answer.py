"""Unit tests for AcceptAnswerUseCase and SubmitAnswerUseCase."""

import pytest

from stackit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    SubmitAnswerRequest,
    SubmitAnswerUseCase,
)
from stackit.domain.error import AlreadyAcceptedError
from stackit.domain.repository import NotificationRepository, QuestionRepository
from tests.conftest import make_principal, seed_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitThenAccept:
    """Answer submission followed by acceptance."""

    @pytest.mark.asyncio
    async def test_submit_and_accept_flow(self, unit_env):
        # Arrange
        submit_use_case = await unit_env.get(SubmitAnswerUseCase)
        accept_use_case = await unit_env.get(AcceptAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        asker, answerer = make_principal(), make_principal()
        question = await seed_question(question_repo, asker.user_id)

        # Act
        submitted = await submit_use_case.execute(
            SubmitAnswerRequest(
                question_id=str(question.id),
                principal=answerer,
                content="Try functools.lru_cache",
            )
        )
        accepted = await accept_use_case.execute(
            AcceptAnswerRequest(
                question_id=str(question.id),
                answer_id=submitted.answer_id,
                principal=asker,
            )
        )

        # Assert
        assert submitted.author_id == str(answerer.user_id)
        assert accepted.accepted_answer_id == submitted.answer_id
        assert accepted.message == "Answer accepted successfully"

        asker_inbox = await notification_repo.find_by_recipient(asker.user_id)
        answerer_inbox = await notification_repo.find_by_recipient(answerer.user_id)
        assert len(asker_inbox) == 1
        assert len(answerer_inbox) == 1

    @pytest.mark.asyncio
    async def test_second_accept_raises(self, unit_env):
        submit_use_case = await unit_env.get(SubmitAnswerUseCase)
        accept_use_case = await unit_env.get(AcceptAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)

        asker = make_principal()
        question = await seed_question(question_repo, asker.user_id)
        answers = [
            await submit_use_case.execute(
                SubmitAnswerRequest(
                    question_id=str(question.id),
                    principal=make_principal(),
                    content=f"Answer {i}",
                )
            )
            for i in range(2)
        ]

        await accept_use_case.execute(
            AcceptAnswerRequest(
                question_id=str(question.id),
                answer_id=answers[0].answer_id,
                principal=asker,
            )
        )

        with pytest.raises(AlreadyAcceptedError):
            await accept_use_case.execute(
                AcceptAnswerRequest(
                    question_id=str(question.id),
                    answer_id=answers[1].answer_id,
                    principal=asker,
                )
            )
