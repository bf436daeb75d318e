"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from stackit.domain.model import Answer, Question
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.value import AnswerId, Principal, QuestionId, Role, UserId

# Keep test output free of telemetry
logfire.configure(send_to_logfire=False, console=False)


def make_principal(role: Role = Role.USER) -> Principal:
    """Principal with a fresh user ID."""
    return Principal(user_id=UserId(uuid4()), role=role)


async def seed_question(
    question_repo: QuestionRepository,
    author_id: UserId,
    title: str = "How do I reverse a list?",
    tags: list[str] | None = None,
    created_at: datetime | None = None,
) -> Question:
    """Store a question directly through the repository."""
    now = created_at or datetime.now()
    question = Question(
        id=QuestionId(uuid4()),
        author_id=author_id,
        title=title,
        description="I tried list.reverse() but it returns None.",
        tags=tags or ["python"],
        created_at=now,
        updated_at=now,
    )
    return await question_repo.save(question)


async def seed_answer(
    answer_repo: AnswerRepository,
    question_repo: QuestionRepository,
    question: Question,
    author_id: UserId,
    content: str = "Use slicing: items[::-1]",
    offset_seconds: int = 0,
) -> Answer:
    """Store an answer and link it to its question."""
    now = datetime.now() + timedelta(seconds=offset_seconds)
    answer = Answer(
        id=AnswerId(uuid4()),
        question_id=question.id,
        author_id=author_id,
        content=content,
        created_at=now,
        updated_at=now,
    )
    await answer_repo.save(answer)
    await question_repo.append_answer(question.id, answer.id)
    return answer
