"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from stackit.domain.model import Answer, Notification, Question, Vote
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationKind,
    QuestionId,
    UserId,
    VotableType,
    VoteId,
    VoteValue,
)


def _uuid(value: Any) -> UUID:
    """Coerce a driver value (UUID or str) to UUID."""
    return UUID(value) if isinstance(value, str) else value


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        description=row["description"],
        tags=list(row.get("tags") or []),
        answer_ids=[AnswerId(_uuid(a)) for a in row.get("answer_ids") or []],
        accepted_answer_id=AnswerId(_uuid(row["accepted_answer_id"]))
        if row.get("accepted_answer_id")
        else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion
    """
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        voter_id=UserId(_uuid(row["voter_id"])),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        value=VoteValue(row["value"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Enums are stored by their primitive value.
    """
    data = vote.model_dump()
    data["votable_type"] = vote.votable_type.value
    data["value"] = int(vote.value)
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        kind=NotificationKind(row["kind"]),
        message=row["message"],
        link=row.get("link"),
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["kind"] = notification.kind.value
    return data
