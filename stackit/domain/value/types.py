"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum
from typing import Annotated

from pydantic import StringConstraints

from stackit.domain.value.common import ValueObject
from stackit.domain.value.identifiers import UserId

TAG_MAX_LENGTH = 50

# Matches the ARRAY(String(50)) tags column
Tag = Annotated[
    str, StringConstraints(strip_whitespace=True, max_length=TAG_MAX_LENGTH)
]


class VoteValue(IntEnum):
    """Signed value of a single vote."""

    UP = 1
    DOWN = -1


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class NotificationKind(str, Enum):
    """Kind of inbox notification."""

    QUESTION_ANSWERED = "question_answered"
    ANSWER_ACCEPTED = "answer_accepted"
    PLATFORM_MESSAGE = "platform_message"


class Role(str, Enum):
    """Role carried by an authenticated principal."""

    GUEST = "guest"
    USER = "user"
    ADMIN = "admin"


class Principal(ValueObject):
    """Authenticated actor supplied by the identity layer.

    The core trusts it completely; credentials are verified upstream.
    """

    user_id: UserId
    role: Role = Role.USER

    @property
    def can_participate(self) -> bool:
        """Guests may read but not post, answer or vote."""
        return self.role in (Role.USER, Role.ADMIN)


class VoteTally(ValueObject):
    """Aggregate vote state of a target, recomputed from its votes."""

    score: int = 0
    total_voters: int = 0
