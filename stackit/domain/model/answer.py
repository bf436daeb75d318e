"""Answer entity."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer entity.

    question_id is a back-reference to the question the answer was
    submitted to. Answers are never moved to another question.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
