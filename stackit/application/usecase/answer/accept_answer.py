"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AcceptanceService
from stackit.domain.value import AnswerId, Principal, QuestionId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: str  # UUID string
    answer_id: str  # UUID string
    principal: Principal


class AcceptAnswerResponse(BaseModel):
    """Accept answer response."""

    message: str
    question_id: str
    accepted_answer_id: str


class AcceptAnswerUseCase:
    """Use case for accepting an answer to one's own question."""

    def __init__(self, acceptance_service: AcceptanceService) -> None:
        """Initialize accept answer use case.

        Args:
            acceptance_service: Acceptance domain service
        """
        self.acceptance_service = acceptance_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Args:
            request: Accept answer request

        Returns:
            Confirmation with the accepted answer ID
        """
        question = await self.acceptance_service.accept_answer(
            question_id=QuestionId(UUID(request.question_id)),
            answer_id=AnswerId(UUID(request.answer_id)),
            principal=request.principal,
        )

        return AcceptAnswerResponse(
            message="Answer accepted successfully",
            question_id=str(question.id),
            accepted_answer_id=str(question.accepted_answer_id),
        )
