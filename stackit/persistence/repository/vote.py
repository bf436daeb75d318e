"""PostgreSQL implementation of Vote repository."""

from typing import Dict, List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.error import ConflictError
from stackit.domain.model import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import UserId, VotableType, VoteId, VoteTally, VoteValue
from stackit.persistence.mappers import row_to_vote, vote_to_dict
from stackit.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_voter_and_votable(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_votables(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote, translating a unique-key violation to ConflictError."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            logfire.warn(
                "Concurrent duplicate vote",
                voter_id=str(vote.voter_id),
                votable_id=str(vote.votable_id),
                error=str(e.orig),
            )
            raise ConflictError("Vote was modified concurrently, please retry")
        return vote

    async def update_value(self, vote_id: VoteId, value: VoteValue) -> Optional[Vote]:
        """Overwrite a vote's value."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(value=int(value), updated_at=func.now())
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def tally(self, votable_type: VotableType, votable_id: UUID) -> VoteTally:
        """Sum vote values and count voters for an item."""
        stmt = select(
            func.coalesce(func.sum(votes_table.c.value), 0),
            func.count(),
        ).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        score, total = result.one()
        return VoteTally(score=int(score), total_voters=int(total))

    async def tally_many(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> Dict[UUID, VoteTally]:
        """Sum vote values and count voters for several items."""
        tallies = {UUID(str(vid)): VoteTally() for vid in votable_ids}
        if not votable_ids:
            return tallies

        stmt = (
            select(
                votes_table.c.votable_id,
                func.sum(votes_table.c.value),
                func.count(),
            )
            .where(
                and_(
                    votes_table.c.votable_type == votable_type.value,
                    votes_table.c.votable_id.in_(votable_ids),
                )
            )
            .group_by(votes_table.c.votable_id)
        )
        result = await self.session.execute(stmt)
        for votable_id, score, total in result.fetchall():
            tallies[UUID(str(votable_id))] = VoteTally(
                score=int(score), total_voters=int(total)
            )
        return tallies
