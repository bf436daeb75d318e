"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import AuthSettings
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    VoteRepository,
)
from stackit.domain.service import (
    AcceptanceService,
    AnswerService,
    AuthorizationService,
    JWTService,
    NotificationService,
    QuestionService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_authorization_service(self) -> AuthorizationService:
        """Provide authorization domain service."""
        return AuthorizationService()

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        authorization_service: AuthorizationService,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            authorization_service=authorization_service,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        notification_service: NotificationService,
        authorization_service: AuthorizationService,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_service=question_service,
            notification_service=notification_service,
            authorization_service=authorization_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        authorization_service: AuthorizationService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            answer_service=answer_service,
            authorization_service=authorization_service,
        )

    @provide
    def get_acceptance_service(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        notification_service: NotificationService,
        authorization_service: AuthorizationService,
    ) -> AcceptanceService:
        """Provide answer acceptance domain service."""
        return AcceptanceService(
            question_service=question_service,
            answer_service=answer_service,
            notification_service=notification_service,
            authorization_service=authorization_service,
        )
