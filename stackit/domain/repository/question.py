"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.question import Question
from stackit.domain.value import AnswerId, QuestionId


class QuestionRepository(ABC):
    """Repository for Question entity.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question by ID and lock it for the current transaction.

        Concurrent writers of the same question block until the
        transaction holding the lock ends.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent(
        self,
        limit: int = 10,
        offset: int = 0,
        tag: Optional[str] = None,
    ) -> List[Question]:
        """Find questions newest first.

        Args:
            limit: Maximum number of questions to return
            offset: Number of questions to skip
            tag: Only return questions carrying this tag

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def count(self, tag: Optional[str] = None) -> int:
        """Count questions, optionally restricted to a tag.

        Args:
            tag: Only count questions carrying this tag

        Returns:
            Number of questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a new question.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def append_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Atomically append an answer ID to the question's answer list.

        Args:
            question_id: The question ID
            answer_id: The answer ID to append

        Returns:
            True if the question exists and was updated, False otherwise
        """
        pass

    @abstractmethod
    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Set the accepted answer only if none is set yet (compare-and-swap).

        Args:
            question_id: The question ID
            answer_id: The answer ID to accept

        Returns:
            True if the field was set, False if the question already had an
            accepted answer (or does not exist)
        """
        pass
