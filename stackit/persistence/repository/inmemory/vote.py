"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from stackit.domain.error import ConflictError
from stackit.domain.model.vote import Vote
from stackit.domain.repository.vote import VoteRepository
from stackit.domain.value import UserId, VotableType, VoteId, VoteTally, VoteValue

VoteKey = tuple[VotableType, UUID, UserId]


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteKey, Vote] = {}

    @staticmethod
    def _key(vote: Vote) -> VoteKey:
        return (vote.votable_type, UUID(str(vote.votable_id)), vote.voter_id)

    async def find_by_voter_and_votable(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        return self._votes.get((votable_type, UUID(str(votable_id)), voter_id))

    async def find_by_voter_and_votables(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        votable_uuids = {UUID(str(vid)) for vid in votable_ids}
        return [
            v
            for v in self._votes.values()
            if v.voter_id == voter_id
            and v.votable_type == votable_type
            and v.votable_id in votable_uuids
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            ConflictError: If the voter already has a vote on the item
        """
        key = self._key(vote)
        if key in self._votes:
            raise ConflictError("Vote was modified concurrently, please retry")
        self._votes[key] = vote
        return vote

    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Optional[Vote]:
        """Overwrite a vote's value."""
        for key, vote in self._votes.items():
            if vote.id == vote_id:
                updated = vote.model_copy(
                    update={"value": value, "updated_at": datetime.now()}
                )
                self._votes[key] = updated
                return updated
        return None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        for key, vote in list(self._votes.items()):
            if vote.id == vote_id:
                del self._votes[key]
                return True
        return False

    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Sum vote values and count voters for an item."""
        votable_uuid = UUID(str(votable_id))
        values = [
            int(v.value)
            for v in self._votes.values()
            if v.votable_type == votable_type and v.votable_id == votable_uuid
        ]
        return VoteTally(score=sum(values), total_voters=len(values))

    async def tally_many(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        """Sum vote values and count voters for several items."""
        return {
            UUID(str(vid)): await self.tally(votable_type, vid) for vid in votable_ids
        }
