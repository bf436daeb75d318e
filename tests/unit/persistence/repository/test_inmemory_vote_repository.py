"""Unit tests for the in-memory vote repository."""

from uuid import uuid4

import pytest

from stackit.domain.error import ConflictError
from stackit.domain.model.vote import Vote
from stackit.domain.value import UserId, VotableType, VoteId, VoteValue
from stackit.persistence.repository.inmemory import InMemoryVoteRepository


def _vote(voter_id, votable_id, value=VoteValue.UP, votable_type=VotableType.ANSWER):
    return Vote(
        id=VoteId(uuid4()),
        voter_id=voter_id,
        votable_type=votable_type,
        votable_id=votable_id,
        value=value,
    )


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_duplicate_key_raises_conflict(self):
        repo = InMemoryVoteRepository()
        voter, target = UserId(uuid4()), uuid4()
        await repo.save(_vote(voter, target))

        with pytest.raises(ConflictError):
            await repo.save(_vote(voter, target, VoteValue.DOWN))

    @pytest.mark.asyncio
    async def test_same_id_different_type_is_separate(self):
        repo = InMemoryVoteRepository()
        voter, target = UserId(uuid4()), uuid4()

        await repo.save(_vote(voter, target, votable_type=VotableType.ANSWER))
        await repo.save(_vote(voter, target, votable_type=VotableType.QUESTION))

        answer_tally = await repo.tally(VotableType.ANSWER, target)
        assert answer_tally.total_voters == 1

    @pytest.mark.asyncio
    async def test_tally_many_includes_unvoted_items(self):
        repo = InMemoryVoteRepository()
        voted, unvoted = uuid4(), uuid4()
        await repo.save(_vote(UserId(uuid4()), voted, VoteValue.DOWN))
        await repo.save(_vote(UserId(uuid4()), voted, VoteValue.DOWN))

        tallies = await repo.tally_many(VotableType.ANSWER, [voted, unvoted])

        assert tallies[voted].score == -2
        assert tallies[voted].total_voters == 2
        assert tallies[unvoted].score == 0

    @pytest.mark.asyncio
    async def test_update_and_delete(self):
        repo = InMemoryVoteRepository()
        vote = await repo.save(_vote(UserId(uuid4()), uuid4()))

        updated = await repo.update_value(vote.id, VoteValue.DOWN)

        assert updated.value == VoteValue.DOWN
        assert await repo.delete(vote.id) is True
        assert await repo.delete(vote.id) is False
