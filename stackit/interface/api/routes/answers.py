"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from stackit.application.usecase.answer import (
    SubmitAnswerRequest,
    SubmitAnswerResponse,
    SubmitAnswerUseCase,
)
from stackit.domain.service import JWTService
from stackit.interface.api.auth import require_principal

router = APIRouter(tags=["answers"], route_class=DishkaRoute)


class SubmitAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str = Field(min_length=1, max_length=5000)


@router.post(
    "/questions/{question_id}/answers",
    response_model=SubmitAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_answer(
    question_id: UUID,
    request: SubmitAnswerAPIRequest,
    submit_answer_use_case: FromDishka[SubmitAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SubmitAnswerResponse:
    """Answer a question.

    Requires authentication. The question author is notified unless they
    answered their own question.
    """
    principal = require_principal(
        jwt_service,
        auth_token,
        authorization,
        detail="Authentication required to answer",
    )
    return await submit_answer_use_case.execute(
        SubmitAnswerRequest(
            question_id=str(question_id),
            principal=principal,
            content=request.content,
        )
    )
