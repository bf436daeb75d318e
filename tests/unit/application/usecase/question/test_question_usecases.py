"""Unit tests for question use cases."""

import pytest

from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from stackit.config import PaginationSettings
from stackit.domain.error import ForbiddenError, NotFoundError
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.service import AcceptanceService, QuestionService, VoteService
from stackit.domain.value import Role, VotableType
from tests.conftest import make_principal, seed_answer, seed_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateQuestionUseCase:
    @pytest.mark.asyncio
    async def test_create_question(self, unit_env):
        use_case = await unit_env.get(CreateQuestionUseCase)
        author = make_principal()

        response = await use_case.execute(
            CreateQuestionRequest(
                principal=author,
                title="What is a metaclass?",
                description="Explain like I'm five.",
                tags=["Python"],
            )
        )

        assert response.author_id == str(author.user_id)
        assert response.tags == ["python"]

    @pytest.mark.asyncio
    async def test_guest_cannot_ask(self, unit_env):
        use_case = await unit_env.get(CreateQuestionUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                CreateQuestionRequest(
                    principal=make_principal(Role.GUEST),
                    title="Title",
                    description="Body",
                )
            )


class TestGetQuestionUseCase:
    @pytest.mark.asyncio
    async def test_detail_includes_scores_order_and_viewer_votes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        vote_service = await unit_env.get(VoteService)
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        asker, viewer = make_principal(), make_principal()
        question = await seed_question(question_repo, asker.user_id)
        a1 = await seed_answer(
            answer_repo, question_repo, question, make_principal().user_id
        )
        a2 = await seed_answer(
            answer_repo,
            question_repo,
            question,
            make_principal().user_id,
            offset_seconds=1,
        )
        await vote_service.cast_vote(VotableType.QUESTION, question.id, viewer, 1)
        await vote_service.cast_vote(VotableType.ANSWER, a2.id, viewer, -1)
        await acceptance_service.accept_answer(question.id, a1.id, asker)

        # Act
        detail = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id), viewer=viewer)
        )

        # Assert
        assert detail.vote_count == 1
        assert detail.user_vote == 1
        assert detail.accepted_answer_id == str(a1.id)
        assert [a.answer_id for a in detail.answers] == [str(a1.id), str(a2.id)]
        assert detail.answers[0].is_accepted is True
        assert detail.answers[0].user_vote is None
        assert detail.answers[1].vote_count == -1
        assert detail.answers[1].user_vote == -1

    @pytest.mark.asyncio
    async def test_anonymous_viewer_gets_no_user_votes(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await seed_question(question_repo, make_principal().user_id)

        detail = await use_case.execute(GetQuestionRequest(question_id=str(question.id)))

        assert detail.user_vote is None
        assert detail.answers == []

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetQuestionRequest(question_id="00000000-0000-0000-0000-000000000000")
            )


class TestListQuestionsUseCase:
    @pytest.mark.asyncio
    async def test_limit_is_capped(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        use_case = ListQuestionsUseCase(
            question_service=question_service,
            vote_service=vote_service,
            pagination_settings=PaginationSettings(default_limit=2, max_limit=3),
        )
        author = make_principal().user_id
        for i in range(4):
            await seed_question(question_repo, author, title=f"Q{i}")

        default_page = await use_case.execute(ListQuestionsRequest())
        capped_page = await use_case.execute(ListQuestionsRequest(limit=50))

        assert len(default_page.questions) == 2
        assert default_page.total_pages == 2
        assert default_page.current_page == 1
        assert len(capped_page.questions) == 3
        assert capped_page.total_pages == 2

    @pytest.mark.asyncio
    async def test_items_carry_counts(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = await seed_question(question_repo, make_principal().user_id)
        await seed_answer(answer_repo, question_repo, question, make_principal().user_id)
        await vote_service.cast_vote(
            VotableType.QUESTION, question.id, make_principal(), -1
        )

        page = await use_case.execute(ListQuestionsRequest())

        assert len(page.questions) == 1
        item = page.questions[0]
        assert item.answer_count == 1
        assert item.vote_count == -1
        assert item.is_accepted is False
