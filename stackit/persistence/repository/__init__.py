"""PostgreSQL repository implementations."""

from stackit.persistence.repository.answer import PostgresAnswerRepository
from stackit.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from stackit.persistence.repository.question import PostgresQuestionRepository
from stackit.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresVoteRepository",
    "PostgresNotificationRepository",
]
