"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.answer import (
    AcceptAnswerUseCase,
    SubmitAnswerUseCase,
)
from stackit.application.usecase.notification import (
    ClearNotificationsUseCase,
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    ListUnreadNotificationsUseCase,
    MarkAllReadUseCase,
    MarkReadUseCase,
)
from stackit.application.usecase.question import (
    CreateQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from stackit.application.usecase.vote import CastVoteUseCase
from stackit.config import PaginationSettings
from stackit.domain.service import (
    AcceptanceService,
    AnswerService,
    AuthorizationService,
    NotificationService,
    QuestionService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self,
        question_service: QuestionService,
        authorization_service: AuthorizationService,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service,
            authorization_service=authorization_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        vote_service: VoteService,
        pagination_settings: PaginationSettings,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            vote_service=vote_service,
            pagination_settings=pagination_settings,
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_answer_use_case(
        self, answer_service: AnswerService
    ) -> SubmitAnswerUseCase:
        """Provide submit answer use case."""
        return SubmitAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, acceptance_service: AcceptanceService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(acceptance_service=acceptance_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_list_unread_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListUnreadNotificationsUseCase:
        """Provide list unread notifications use case."""
        return ListUnreadNotificationsUseCase(
            notification_service=notification_service
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllReadUseCase:
        """Provide mark all read use case."""
        return MarkAllReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_clear_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ClearNotificationsUseCase:
        """Provide clear notifications use case."""
        return ClearNotificationsUseCase(notification_service=notification_service)
