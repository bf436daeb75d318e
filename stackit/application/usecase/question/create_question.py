"""Create question use case."""

from datetime import datetime

from pydantic import BaseModel

from stackit.domain.service import AuthorizationService, QuestionService
from stackit.domain.value import Principal


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    principal: Principal
    title: str
    description: str
    tags: list[str] = []


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    author_id: str
    title: str
    description: str
    tags: list[str]
    created_at: datetime


class CreateQuestionUseCase:
    """Use case for asking a new question."""

    def __init__(
        self,
        question_service: QuestionService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            authorization_service: Authorization domain service
        """
        self.question_service = question_service
        self.authorization_service = authorization_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Args:
            request: Create question request

        Returns:
            Created question

        Raises:
            ForbiddenError: If the principal may not post
        """
        self.authorization_service.ensure_can_participate(
            request.principal, "ask a question"
        )

        question = await self.question_service.create_question(
            author_id=request.principal.user_id,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )

        return CreateQuestionResponse(
            question_id=str(question.id),
            author_id=str(question.author_id),
            title=question.title,
            description=question.description,
            tags=question.tags,
            created_at=question.created_at,
        )
