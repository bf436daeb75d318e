"""Answer acceptance domain service.

A question moves from unaccepted to accepted exactly once. Only the
question author may make the transition, and the accepted answer must
belong to the question.
"""

import logfire

from stackit.domain.error import (
    AlreadyAcceptedError,
    NotFoundError,
    ReferentialMismatchError,
)
from stackit.domain.model.question import Question
from stackit.domain.value import AnswerId, NotificationKind, Principal, QuestionId

from .answer_service import AnswerService
from .authorization_service import AuthorizationService
from .base import Service
from .notification_service import NotificationService
from .question_service import QuestionService


class AcceptanceService(Service):
    """Domain service for accepting answers."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        notification_service: NotificationService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize acceptance service.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            notification_service: Notification domain service
            authorization_service: Authorization domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.notification_service = notification_service
        self.authorization_service = authorization_service

    async def accept_answer(
        self,
        question_id: QuestionId,
        answer_id: AnswerId,
        principal: Principal,
    ) -> Question:
        """Accept an answer on behalf of the question author.

        The write is a compare-and-swap on the accepted answer field, so of
        several concurrent attempts exactly one succeeds. The answer author
        is notified unless they are the one accepting; the notification is
        best-effort.

        Args:
            question_id: Question ID
            answer_id: Answer ID to accept
            principal: Acting principal

        Returns:
            The question with its accepted answer set

        Raises:
            NotFoundError: If the question or answer does not exist
            ReferentialMismatchError: If the answer belongs to another question
            ForbiddenError: If the principal is not the question author
            AlreadyAcceptedError: If an answer was already accepted
        """
        with logfire.span(
            "acceptance_service.accept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(principal.user_id),
        ):
            question = await self.question_service.get_question_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", str(question_id))

            answer = await self.answer_service.get_answer_by_id(answer_id)
            if answer is None:
                raise NotFoundError("Answer", str(answer_id))

            if answer.question_id != question.id:
                logfire.warn(
                    "Answer does not belong to question",
                    question_id=str(question_id),
                    answer_id=str(answer_id),
                    answer_question_id=str(answer.question_id),
                )
                raise ReferentialMismatchError(str(answer_id), str(question_id))

            self.authorization_service.ensure_owner(
                principal,
                action="accept an answer on",
                resource="question",
                resource_id=str(question_id),
                owner_id=question.author_id,
            )

            if question.accepted_answer_id is not None:
                raise AlreadyAcceptedError(
                    str(question_id), str(question.accepted_answer_id)
                )

            swapped = await self.question_service.set_accepted_answer(
                question_id, answer_id
            )
            if not swapped:
                # Another request accepted an answer after our read
                logfire.warn(
                    "Concurrent acceptance lost",
                    question_id=str(question_id),
                    answer_id=str(answer_id),
                )
                raise AlreadyAcceptedError(str(question_id))

            logfire.info(
                "Answer accepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
            )

            if answer.author_id != principal.user_id:
                await self.notification_service.notify_best_effort(
                    recipient_id=answer.author_id,
                    kind=NotificationKind.ANSWER_ACCEPTED,
                    message="Your answer was accepted!",
                    link=f"/questions/{question_id}",
                )

            return question.model_copy(update={"accepted_answer_id": answer_id})
