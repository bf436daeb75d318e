"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query

from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.service import JWTService
from stackit.domain.value import VotableType
from stackit.interface.api.auth import require_principal

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post("/questions/{question_id}/vote", response_model=CastVoteResponse)
async def vote_on_question(
    question_id: UUID,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    vote: int = Query(description="1 to upvote, -1 to downvote"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CastVoteResponse:
    """Vote on a question.

    Requires authentication. Repeating the same vote withdraws it; the
    opposite vote replaces it.
    """
    principal = require_principal(
        jwt_service,
        auth_token,
        authorization,
        detail="Authentication required to vote",
    )
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question_id),
            principal=principal,
            vote=vote,
        )
    )


@router.post("/answers/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_on_answer(
    answer_id: UUID,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    vote: int = Query(description="1 to upvote, -1 to downvote"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CastVoteResponse:
    """Vote on an answer.

    Requires authentication. Same toggle rules as question votes.
    """
    principal = require_principal(
        jwt_service,
        auth_token,
        authorization,
        detail="Authentication required to vote",
    )
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.ANSWER,
            votable_id=str(answer_id),
            principal=principal,
            vote=vote,
        )
    )
