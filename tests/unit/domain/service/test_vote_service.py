"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from stackit.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from stackit.domain.service import VoteService
from stackit.domain.value import Role, VotableType, VoteValue
from tests.conftest import make_principal, seed_answer, seed_question
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCastVote:
    """Tests for cast_vote toggle and switch semantics."""

    @pytest.mark.asyncio
    async def test_toggle_sequence_on_answer(self, unit_env):
        """+1, +1, -1 on an answer yields scores 1, 0, -1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        voter = make_principal()
        question = await seed_question(question_repo, make_principal().user_id)
        answer = await seed_answer(
            answer_repo, question_repo, question, make_principal().user_id
        )

        # Act & Assert - first upvote is recorded
        first = await vote_service.cast_vote(VotableType.ANSWER, answer.id, voter, 1)
        assert first.score == 1
        assert first.voter_value == VoteValue.UP
        assert first.total_voters == 1

        # Same value again withdraws the vote
        second = await vote_service.cast_vote(VotableType.ANSWER, answer.id, voter, 1)
        assert second.score == 0
        assert second.voter_value is None
        assert second.total_voters == 0
        assert (
            await vote_repo.find_by_voter_and_votable(
                voter.user_id, VotableType.ANSWER, answer.id
            )
            is None
        )

        # Downvote after withdrawal records a fresh -1
        third = await vote_service.cast_vote(VotableType.ANSWER, answer.id, voter, -1)
        assert third.score == -1
        assert third.voter_value == VoteValue.DOWN
        stored = await vote_repo.find_by_voter_and_votable(
            voter.user_id, VotableType.ANSWER, answer.id
        )
        assert stored is not None
        assert stored.value == VoteValue.DOWN

    @pytest.mark.asyncio
    async def test_opposite_vote_switches_in_place(self, unit_env):
        """+1 then -1 leaves exactly one vote with value -1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question_repo = await unit_env.get(QuestionRepository)

        voter = make_principal()
        question = await seed_question(question_repo, make_principal().user_id)

        # Act
        await vote_service.cast_vote(VotableType.QUESTION, question.id, voter, 1)
        original = await vote_repo.find_by_voter_and_votable(
            voter.user_id, VotableType.QUESTION, question.id
        )
        result = await vote_service.cast_vote(
            VotableType.QUESTION, question.id, voter, -1
        )

        # Assert
        assert result.score == -1
        assert result.total_voters == 1
        switched = await vote_repo.find_by_voter_and_votable(
            voter.user_id, VotableType.QUESTION, question.id
        )
        assert switched.id == original.id
        assert switched.value == VoteValue.DOWN

    @pytest.mark.asyncio
    async def test_third_identical_vote_reinserts(self, unit_env):
        """Casting the same value three times ends with the vote present."""
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)

        voter = make_principal()
        question = await seed_question(question_repo, make_principal().user_id)

        for _ in range(3):
            result = await vote_service.cast_vote(
                VotableType.QUESTION, question.id, voter, -1
            )

        assert result.score == -1
        assert result.voter_value == VoteValue.DOWN

    @pytest.mark.asyncio
    async def test_score_is_sum_across_voters(self, unit_env):
        """Score is the sum of every voter's current value."""
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)

        question = await seed_question(question_repo, make_principal().user_id)
        up1, up2, down = make_principal(), make_principal(), make_principal()

        await vote_service.cast_vote(VotableType.QUESTION, question.id, up1, 1)
        await vote_service.cast_vote(VotableType.QUESTION, question.id, up2, 1)
        result = await vote_service.cast_vote(
            VotableType.QUESTION, question.id, down, -1
        )

        assert result.score == 1
        assert result.total_voters == 3
        tally = await vote_service.get_tally(VotableType.QUESTION, question.id)
        assert tally.score == 1
        assert tally.total_voters == 3

    @pytest.mark.asyncio
    async def test_author_may_vote_on_own_question(self, unit_env):
        """Self-voting is allowed."""
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)

        author = make_principal()
        question = await seed_question(question_repo, author.user_id)

        result = await vote_service.cast_vote(
            VotableType.QUESTION, question.id, author, 1
        )

        assert result.score == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [0, 2, -2, True])
    async def test_invalid_value_raises_error(self, unit_env, value):
        """Only +1 and -1 are accepted."""
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await seed_question(question_repo, make_principal().user_id)

        with pytest.raises(InvalidInputError, match="Vote must be 1 or -1"):
            await vote_service.cast_vote(
                VotableType.QUESTION, question.id, make_principal(), value
            )

    @pytest.mark.asyncio
    async def test_vote_on_nonexistent_question_raises_error(self, unit_env):
        """Voting on a missing question raises NotFoundError."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await vote_service.cast_vote(
                VotableType.QUESTION, uuid4(), make_principal(), 1
            )

    @pytest.mark.asyncio
    async def test_vote_on_nonexistent_answer_raises_error(self, unit_env):
        """Voting on a missing answer raises NotFoundError."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.cast_vote(
                VotableType.ANSWER, uuid4(), make_principal(), -1
            )

    @pytest.mark.asyncio
    async def test_guest_cannot_vote(self, unit_env):
        """Guests are read-only."""
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await seed_question(question_repo, make_principal().user_id)

        with pytest.raises(ForbiddenError):
            await vote_service.cast_vote(
                VotableType.QUESTION, question.id, make_principal(Role.GUEST), 1
            )

    @pytest.mark.asyncio
    async def test_concurrent_first_vote_surfaces_conflict(
        self, unit_env, monkeypatch
    ):
        """A racing first vote that wins the unique key yields ConflictError."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question_repo = await unit_env.get(QuestionRepository)

        voter = make_principal()
        question = await seed_question(question_repo, make_principal().user_id)
        # The other request inserts first
        await vote_service.cast_vote(VotableType.QUESTION, question.id, voter, 1)

        # Our request read "no vote" before that insert
        async def stale_lookup(*args, **kwargs):
            return None

        monkeypatch.setattr(vote_repo, "find_by_voter_and_votable", stale_lookup)

        with pytest.raises(ConflictError):
            await vote_service.cast_vote(VotableType.QUESTION, question.id, voter, 1)


class TestGetVoterValues:
    """Tests for get_voter_values batch lookup."""

    @pytest.mark.asyncio
    async def test_returns_value_or_none_per_item(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        voter = make_principal()
        question = await seed_question(question_repo, make_principal().user_id)
        a1 = await seed_answer(
            answer_repo, question_repo, question, make_principal().user_id
        )
        a2 = await seed_answer(
            answer_repo, question_repo, question, make_principal().user_id
        )
        await vote_service.cast_vote(VotableType.ANSWER, a1.id, voter, -1)

        values = await vote_service.get_voter_values(
            voter.user_id, VotableType.ANSWER, [a1.id, a2.id]
        )

        assert values == {a1.id: VoteValue.DOWN, a2.id: None}

    @pytest.mark.asyncio
    async def test_empty_ids_returns_empty_mapping(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        values = await vote_service.get_voter_values(
            make_principal().user_id, VotableType.ANSWER, []
        )

        assert values == {}
