"""Repository interfaces for StackIt domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.repository.question import QuestionRepository
from stackit.domain.repository.vote import VoteRepository

__all__ = [
    "QuestionRepository",
    "AnswerRepository",
    "VoteRepository",
    "NotificationRepository",
]
