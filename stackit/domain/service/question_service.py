"""Question domain service."""

import math
from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError

from stackit.domain.error import InvalidInputError
from stackit.domain.model.question import Question
from stackit.domain.repository import QuestionRepository
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        description: str,
        tags: list[str] | None = None,
    ) -> Question:
        """Create a question.

        Args:
            author_id: Author user ID
            title: Question title
            description: Question body
            tags: Optional tags

        Returns:
            Created question

        Raises:
            InvalidInputError: If the title, description or a tag is out of bounds
        """
        with logfire.span(
            "question_service.create_question", author_id=str(author_id)
        ):
            now = datetime.now()
            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    author_id=author_id,
                    title=title,
                    description=description,
                    tags=tags or [],
                    answer_ids=[],
                    accepted_answer_id=None,
                    created_at=now,
                    updated_at=now,
                )
            except ValidationError as e:
                raise InvalidInputError.from_validation(e) from e
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created",
                question_id=str(saved.id),
                author_id=str(author_id),
                tags=saved.tags,
            )
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question:
                logfire.info("Question found", question_id=str(question_id))
            else:
                logfire.warn("Question not found", question_id=str(question_id))
            return question

    async def get_question_for_update(
        self, question_id: QuestionId
    ) -> Question | None:
        """Get a question by ID and lock it for the current transaction.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_for_update", question_id=str(question_id)
        ):
            return await self.question_repository.find_by_id_for_update(question_id)

    async def list_questions(
        self, page: int, limit: int, tag: str | None = None
    ) -> tuple[list[Question], int]:
        """List questions newest first.

        Args:
            page: 1-based page number
            limit: Page size
            tag: Optional tag filter

        Returns:
            Tuple of (questions on the page, total number of pages)
        """
        with logfire.span(
            "question_service.list_questions", page=page, limit=limit, tag=tag
        ):
            normalized_tag = tag.strip().lower() if tag else None
            questions = await self.question_repository.find_recent(
                limit=limit,
                offset=(page - 1) * limit,
                tag=normalized_tag,
            )
            total = await self.question_repository.count(tag=normalized_tag)
            total_pages = math.ceil(total / limit) if limit else 0
            logfire.info(
                "Questions listed",
                page=page,
                count=len(questions),
                total=total,
            )
            return questions, total_pages

    async def append_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Append an answer to the question's ordered answer list.

        Args:
            question_id: Question ID
            answer_id: Answer ID

        Returns:
            True if the question was updated
        """
        with logfire.span(
            "question_service.append_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            appended = await self.question_repository.append_answer(
                question_id, answer_id
            )
            if not appended:
                logfire.warn(
                    "Answer not appended, question missing",
                    question_id=str(question_id),
                    answer_id=str(answer_id),
                )
            return appended

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Set the accepted answer if the question has none yet.

        Args:
            question_id: Question ID
            answer_id: Answer ID

        Returns:
            True if this call set the field, False if it was already set
        """
        with logfire.span(
            "question_service.set_accepted_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            return await self.question_repository.set_accepted_answer(
                question_id, answer_id
            )
