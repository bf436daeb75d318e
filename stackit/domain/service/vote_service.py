"""Vote domain service.

The vote ledger keeps one signed vote per (item, voter). Casting the same
value twice withdraws the vote, casting the opposite value switches it.
Scores are always recomputed from the stored votes.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from stackit.domain.error import InvalidInputError, NotFoundError
from stackit.domain.model.vote import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import (
    AnswerId,
    Principal,
    QuestionId,
    UserId,
    VotableType,
    VoteId,
    VoteTally,
    VoteValue,
)

from .answer_service import AnswerService
from .authorization_service import AuthorizationService
from .base import Service
from .question_service import QuestionService


class VoteResult(BaseModel):
    """Outcome of a cast vote."""

    score: int
    voter_value: VoteValue | None  # None when the vote was withdrawn
    total_voters: int


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
            authorization_service: Authorization domain service
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service
        self.authorization_service = authorization_service

    async def cast_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        principal: Principal,
        value: int,
    ) -> VoteResult:
        """Cast, switch or withdraw a vote.

        - no existing vote: the vote is recorded
        - existing vote with the same value: the vote is removed
        - existing vote with the opposite value: the value is overwritten

        The target row is locked for the rest of the transaction so that
        concurrent votes on the same item are applied one after another.
        Repeating a call is safe: it toggles the same vote back and forth.

        Args:
            votable_type: Type of item (question or answer)
            votable_id: ID of the item
            principal: Acting principal (the voter)
            value: +1 or -1

        Returns:
            Recomputed score, the voter's resulting value and voter count

        Raises:
            InvalidInputError: If value is not +1 or -1
            ForbiddenError: If the principal may not vote
            NotFoundError: If the item does not exist
            ConflictError: If a concurrent first vote by the same voter won
        """
        with logfire.span(
            "vote_service.cast_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            voter_id=str(principal.user_id),
            value=value,
        ):
            vote_value = self._parse_value(value)
            self.authorization_service.ensure_can_participate(principal, "vote")
            await self._lock_votable(votable_type, votable_id)

            voter_id = principal.user_id
            existing = await self.vote_repository.find_by_voter_and_votable(
                voter_id, votable_type, votable_id
            )

            voter_value: VoteValue | None
            if existing is None:
                now = datetime.now()
                await self.vote_repository.save(
                    Vote(
                        id=VoteId(uuid4()),
                        voter_id=voter_id,
                        votable_type=votable_type,
                        votable_id=votable_id,
                        value=vote_value,
                        created_at=now,
                        updated_at=now,
                    )
                )
                voter_value = vote_value
                logfire.info("Vote cast", votable_id=str(votable_id))
            elif existing.value == vote_value:
                await self.vote_repository.delete(existing.id)
                voter_value = None
                logfire.info("Vote withdrawn", votable_id=str(votable_id))
            else:
                await self.vote_repository.update_value(existing.id, vote_value)
                voter_value = vote_value
                logfire.info(
                    "Vote switched",
                    votable_id=str(votable_id),
                    value=int(vote_value),
                )

            tally = await self.vote_repository.tally(votable_type, votable_id)
            return VoteResult(
                score=tally.score,
                voter_value=voter_value,
                total_voters=tally.total_voters,
            )

    async def get_tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Get the current score and voter count of an item.

        Args:
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            Vote tally
        """
        return await self.vote_repository.tally(votable_type, votable_id)

    async def get_tallies(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        """Get tallies for several items of the same type.

        Args:
            votable_type: Type of items
            votable_ids: IDs of the items

        Returns:
            Mapping of item ID to tally (empty tally for items without votes)
        """
        if not votable_ids:
            return {}
        return await self.vote_repository.tally_many(votable_type, votable_ids)

    async def get_voter_values(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> dict[UUID, VoteValue | None]:
        """Look up a user's own vote on several items.

        Args:
            voter_id: Voter user ID
            votable_type: Type of items
            votable_ids: IDs of the items

        Returns:
            Mapping of item ID to the user's vote value (None if not voted)
        """
        if not votable_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_voter_and_votables(
            voter_id, votable_type, votable_ids
        )
        by_id = {UUID(str(vote.votable_id)): vote.value for vote in votes}
        return {vid: by_id.get(UUID(str(vid))) for vid in votable_ids}

    @staticmethod
    def _parse_value(value: int) -> VoteValue:
        """Validate a raw vote value."""
        # bool is an int subclass; True must not count as an upvote
        if isinstance(value, bool):
            raise InvalidInputError("Vote must be 1 or -1")
        try:
            return VoteValue(value)
        except ValueError:
            raise InvalidInputError("Vote must be 1 or -1")

    async def _lock_votable(self, votable_type: VotableType, votable_id: UUID) -> None:
        """Check the item exists and lock it for the current transaction."""
        if votable_type == VotableType.QUESTION:
            target = await self.question_service.get_question_for_update(
                QuestionId(votable_id)
            )
            resource = "Question"
        else:
            target = await self.answer_service.get_answer_for_update(
                AnswerId(votable_id)
            )
            resource = "Answer"

        if target is None:
            logfire.warn(
                "Vote on non-existent item",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
            )
            raise NotFoundError(resource, str(votable_id))
