"""In-memory question repository for testing."""

from datetime import datetime
from typing import Optional

from stackit.domain.model.question import Question
from stackit.domain.repository.question import QuestionRepository
from stackit.domain.value import AnswerId, QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question by ID (no locking needed in memory)."""
        return self._questions.get(question_id)

    async def find_recent(
        self,
        limit: int = 10,
        offset: int = 0,
        tag: Optional[str] = None,
    ) -> list[Question]:
        """Find questions newest first."""
        questions = list(self._questions.values())
        if tag:
            questions = [q for q in questions if tag in q.tags]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def count(self, tag: Optional[str] = None) -> int:
        """Count questions, optionally restricted to a tag."""
        if tag:
            return sum(1 for q in self._questions.values() if tag in q.tags)
        return len(self._questions)

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question

    async def append_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Append an answer ID to a question."""
        question = self._questions.get(question_id)
        if question is None:
            return False
        self._questions[question_id] = question.model_copy(
            update={
                "answer_ids": [*question.answer_ids, answer_id],
                "updated_at": datetime.now(),
            }
        )
        return True

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Set the accepted answer only while none is set."""
        question = self._questions.get(question_id)
        if question is None or question.accepted_answer_id is not None:
            return False
        self._questions[question_id] = question.model_copy(
            update={"accepted_answer_id": answer_id, "updated_at": datetime.now()}
        )
        return True
