"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from stackit.domain.model.vote import Vote
from stackit.domain.value import UserId, VotableType, VoteId, VoteTally, VoteValue


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are keyed by (votable_type, votable_id, voter_id); the key is
    unique so a voter never holds two votes on the same item.
    """

    @abstractmethod
    async def find_by_voter_and_votable(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            voter_id: The voter's ID
            votable_type: Type of item (question or answer)
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_votables(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            voter_id: The voter's ID
            votable_type: Type of items
            votable_ids: IDs of the items to check

        Returns:
            List of votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            ConflictError: If the voter already holds a vote on the item
        """
        pass

    @abstractmethod
    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Optional[Vote]:
        """Overwrite the value of an existing vote.

        Args:
            vote_id: The vote ID
            value: New vote value

        Returns:
            The updated vote, None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Compute the score and voter count of an item.

        Args:
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            Sum of vote values and number of distinct voters
        """
        pass

    @abstractmethod
    async def tally_many(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> Dict[UUID, VoteTally]:
        """Compute tallies for several items at once.

        Items without votes are present with an empty tally.

        Args:
            votable_type: Type of items
            votable_ids: IDs of the items

        Returns:
            Mapping of item ID to tally
        """
        pass
