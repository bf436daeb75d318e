"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError

from stackit.domain.error import InvalidInputError, NotFoundError
from stackit.domain.model.answer import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, NotificationKind, Principal, QuestionId

from .authorization_service import AuthorizationService
from .base import Service
from .notification_service import NotificationService
from .question_service import QuestionService


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        notification_service: NotificationService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_service: Question domain service
            notification_service: Notification domain service
            authorization_service: Authorization domain service
        """
        self.answer_repository = answer_repository
        self.question_service = question_service
        self.notification_service = notification_service
        self.authorization_service = authorization_service

    async def submit_answer(
        self, question_id: QuestionId, principal: Principal, content: str
    ) -> Answer:
        """Submit an answer to a question.

        Appends the answer to the question's answer list and notifies the
        question author, unless they answered their own question. The
        notification is best-effort: a delivery failure is logged and the
        answer is still created.

        Args:
            question_id: Question ID
            principal: Acting principal (becomes the answer author)
            content: Answer body

        Returns:
            Created answer

        Raises:
            ForbiddenError: If the principal may not post
            NotFoundError: If the question does not exist
            InvalidInputError: If the content is empty or too long
        """
        with logfire.span(
            "answer_service.submit_answer",
            question_id=str(question_id),
            author_id=str(principal.user_id),
        ):
            self.authorization_service.ensure_can_participate(principal, "answer")

            question = await self.question_service.get_question_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", str(question_id))

            now = datetime.now()
            try:
                answer = Answer(
                    id=AnswerId(uuid4()),
                    question_id=question_id,
                    author_id=principal.user_id,
                    content=content,
                    created_at=now,
                    updated_at=now,
                )
            except ValidationError as e:
                raise InvalidInputError.from_validation(e) from e
            saved = await self.answer_repository.save(answer)

            if not await self.question_service.append_answer(question_id, saved.id):
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Answer submitted",
                answer_id=str(saved.id),
                question_id=str(question_id),
                author_id=str(principal.user_id),
            )

            if question.author_id != principal.user_id:
                await self.notification_service.notify_best_effort(
                    recipient_id=question.author_id,
                    kind=NotificationKind.QUESTION_ANSWERED,
                    message=f'Someone answered your question: "{question.title}"',
                    link=f"/questions/{question_id}",
                )

            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID.

        Args:
            answer_id: Answer ID

        Returns:
            Answer if found, None otherwise
        """
        with logfire.span("answer_service.get_answer_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if answer:
                logfire.info("Answer found", answer_id=str(answer_id))
            else:
                logfire.warn("Answer not found", answer_id=str(answer_id))
            return answer

    async def get_answer_for_update(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID and lock it for the current transaction.

        Args:
            answer_id: Answer ID

        Returns:
            Answer if found, None otherwise
        """
        with logfire.span(
            "answer_service.get_answer_for_update", answer_id=str(answer_id)
        ):
            return await self.answer_repository.find_by_id_for_update(answer_id)

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get all answers to a question in submission order.

        Args:
            question_id: Question ID

        Returns:
            Answers, oldest first
        """
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Answers retrieved for question",
                question_id=str(question_id),
                count=len(answers),
            )
            return answers
