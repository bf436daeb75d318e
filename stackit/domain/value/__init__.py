"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    NotificationId,
    QuestionId,
    UserId,
    VoteId,
)
from stackit.domain.value.types import (
    NotificationKind,
    Principal,
    Role,
    TAG_MAX_LENGTH,
    Tag,
    VotableType,
    VoteTally,
    VoteValue,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    "NotificationId",
    # Types
    "VoteValue",
    "VotableType",
    "VoteTally",
    "NotificationKind",
    "Role",
    "Principal",
    "Tag",
    "TAG_MAX_LENGTH",
]
