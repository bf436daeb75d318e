"""Unit tests for CastVoteUseCase."""

import pytest

from stackit.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from stackit.domain.repository import QuestionRepository
from stackit.domain.service import VoteService
from stackit.domain.value import VotableType
from tests.conftest import make_principal, seed_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_response_reports_score_and_user_vote(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        use_case = CastVoteUseCase(vote_service=vote_service)

        voter = make_principal()
        question = await seed_question(question_repo, make_principal().user_id)
        request = CastVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question.id),
            principal=voter,
            vote=1,
        )

        # Act
        cast = await use_case.execute(request)
        withdrawn = await use_case.execute(request)

        # Assert
        assert cast.vote_count == 1
        assert cast.user_vote == 1
        assert cast.total_votes == 1
        assert withdrawn.vote_count == 0
        assert withdrawn.user_vote is None
        assert withdrawn.total_votes == 0

    @pytest.mark.asyncio
    async def test_downvote_reports_negative_user_vote(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await seed_question(question_repo, make_principal().user_id)

        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.QUESTION,
                votable_id=str(question.id),
                principal=make_principal(),
                vote=-1,
            )
        )

        assert response.vote_count == -1
        assert response.user_vote == -1
