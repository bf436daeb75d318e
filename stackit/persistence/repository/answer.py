"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_id_for_update(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID with a row lock (SELECT ... FOR UPDATE)."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.id == answer_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(answers_table.c.created_at, answers_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer
