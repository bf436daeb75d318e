"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import VoteService
from stackit.domain.value import Principal, VotableType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    principal: Principal
    vote: int  # +1 or -1, validated by the vote service


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote_count: int  # Score after the vote
    user_vote: int | None  # Caller's resulting vote, None if withdrawn
    total_votes: int  # Number of distinct voters


class CastVoteUseCase:
    """Use case for voting on a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Recomputed score and the caller's vote state
        """
        result = await self.vote_service.cast_vote(
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            principal=request.principal,
            value=request.vote,
        )

        return CastVoteResponse(
            vote_count=result.score,
            user_vote=int(result.voter_value) if result.voter_value else None,
            total_votes=result.total_voters,
        )
