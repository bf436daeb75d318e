"""In-memory answer repository for testing."""

from typing import Optional

from stackit.domain.model.answer import Answer
from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_id_for_update(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID (no locking needed in memory)."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, oldest first."""
        # dict preserves insertion order, which breaks created_at ties
        return sorted(
            (a for a in self._answers.values() if a.question_id == question_id),
            key=lambda a: a.created_at,
        )

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers[answer.id] = answer
        return answer
