"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

from sqlalchemy import func, insert, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Question
from stackit.domain.repository import QuestionRepository
from stackit.domain.value import AnswerId, QuestionId
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question by ID with a row lock (SELECT ... FOR UPDATE)."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def find_recent(
        self,
        limit: int = 10,
        offset: int = 0,
        tag: Optional[str] = None,
    ) -> List[Question]:
        """Find questions newest first."""
        stmt = select(questions_table)
        if tag:
            stmt = stmt.where(questions_table.c.tags.contains([tag]))
        stmt = (
            stmt.order_by(questions_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def count(self, tag: Optional[str] = None) -> int:
        """Count questions, optionally restricted to a tag."""
        stmt = select(func.count()).select_from(questions_table)
        if tag:
            stmt = stmt.where(questions_table.c.tags.contains([tag]))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Insert a new question."""
        stmt = insert(questions_table).values(**question_to_dict(question))
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def append_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Append an answer ID in a single UPDATE (array_append)."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                answer_ids=func.array_append(
                    questions_table.c.answer_ids, literal(answer_id, type_=UUID)
                ),
                updated_at=func.now(),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Set accepted_answer_id only while it is still NULL."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .where(questions_table.c.accepted_answer_id.is_(None))
            .values(accepted_answer_id=answer_id, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]
