"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from stackit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
)
from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from stackit.domain.service import JWTService
from stackit.domain.value import Tag
from stackit.interface.api.auth import optional_principal, require_principal

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=5000)
    tags: list[Tag] = Field(default_factory=list)


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateQuestionResponse:
    """Ask a new question.

    Requires authentication.
    """
    principal = require_principal(
        jwt_service,
        auth_token,
        authorization,
        detail="Authentication required to ask a question",
    )
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            principal=principal,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
    )


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    tag: str | None = Query(default=None),
) -> ListQuestionsResponse:
    """List questions newest first.

    Args:
        page: 1-based page number
        limit: Page size (capped by configuration)
        tag: Only list questions carrying this tag
    """
    return await list_questions_use_case.execute(
        ListQuestionsRequest(page=page, limit=limit, tag=tag)
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetQuestionResponse:
    """Get a question with its answers.

    Authentication is optional; when present the caller's own votes are
    included.
    """
    viewer = optional_principal(jwt_service, auth_token, authorization)
    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=str(question_id), viewer=viewer)
    )


@router.post(
    "/{question_id}/accept/{answer_id}", response_model=AcceptAnswerResponse
)
async def accept_answer(
    question_id: UUID,
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AcceptAnswerResponse:
    """Accept an answer to the caller's own question.

    Requires authentication as the question author. A question can have
    at most one accepted answer, and it cannot be changed once set.
    """
    principal = require_principal(
        jwt_service,
        auth_token,
        authorization,
        detail="Authentication required to accept an answer",
    )
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(
            question_id=str(question_id),
            answer_id=str(answer_id),
            principal=principal,
        )
    )
