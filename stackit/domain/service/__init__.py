"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import AnswerService
from .authorization_service import AuthorizationService
from .base import Service
from .jwt_service import JWTService
from .notification_service import NotificationService
from .question_service import QuestionService
from .vote_service import VoteResult, VoteService

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "AuthorizationService",
    "JWTService",
    "NotificationService",
    "QuestionService",
    "Service",
    "VoteResult",
    "VoteService",
]
