"""Vote entity.

Votes are signed (+1/-1). Each user holds at most one vote per item
(question or answer); repeating the same vote withdraws it.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import UserId, VotableType, VoteId, VoteValue


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Polymorphic reference to votable (question or answer)
    """

    id: VoteId
    voter_id: UserId
    votable_type: VotableType
    votable_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    value: VoteValue
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
