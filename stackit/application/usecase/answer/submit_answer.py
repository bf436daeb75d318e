"""Submit answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AnswerService
from stackit.domain.value import Principal, QuestionId


class SubmitAnswerRequest(BaseModel):
    """Submit answer request."""

    question_id: str  # UUID string
    principal: Principal
    content: str


class SubmitAnswerResponse(BaseModel):
    """Submit answer response."""

    answer_id: str
    question_id: str
    author_id: str
    content: str
    created_at: datetime


class SubmitAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize submit answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: SubmitAnswerRequest) -> SubmitAnswerResponse:
        """Execute submit answer flow.

        Args:
            request: Submit answer request

        Returns:
            Created answer
        """
        answer = await self.answer_service.submit_answer(
            question_id=QuestionId(UUID(request.question_id)),
            principal=request.principal,
            content=request.content,
        )

        return SubmitAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            content=answer.content,
            created_at=answer.created_at,
        )
