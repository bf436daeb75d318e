"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.answer import Answer
from stackit.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID and lock it for the current transaction.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question in creation order.

        Args:
            question_id: The question ID

        Returns:
            List of answers, oldest first
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save a new answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass
