"""Question aggregate.

A question is asked once by its author and collects answers in creation
order. Exactly one of those answers may be designated as accepted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from stackit.domain.model.common import DomainModel
from stackit.domain.value import AnswerId, QuestionId, Tag, UserId


class Question(DomainModel):
    """Question entity.

    Business rules:
    - answer_ids preserves the order in which answers were submitted
    - accepted_answer_id is one-shot: once set it is never overwritten here
      (clearing it is a moderation action handled elsewhere)
    - accepted_answer_id always references one of this question's answers
    """

    id: QuestionId
    author_id: UserId
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=5000)
    tags: list[Tag] = Field(default_factory=list)
    answer_ids: list[AnswerId] = Field(default_factory=list)
    accepted_answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Trim surrounding whitespace from the title."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        """Lowercase and trim tags, dropping empty ones."""
        if v is None:
            return []
        return [t.strip().lower() for t in v if t and t.strip()]

    @property
    def is_accepted(self) -> bool:
        """Whether an answer has been accepted."""
        return self.accepted_answer_id is not None
