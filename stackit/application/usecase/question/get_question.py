"""Get question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.domain.error import NotFoundError
from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import Principal, QuestionId, VotableType, VoteTally


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    viewer: Principal | None = None  # Set when the caller is authenticated


class AnswerDetail(BaseModel):
    """Answer as shown on the question page."""

    answer_id: str
    author_id: str
    content: str
    vote_count: int
    total_votes: int
    user_vote: int | None
    is_accepted: bool
    created_at: datetime


class GetQuestionResponse(BaseModel):
    """Get question response."""

    question_id: str
    author_id: str
    title: str
    description: str
    tags: list[str]
    accepted_answer_id: str | None
    vote_count: int
    total_votes: int
    user_vote: int | None
    answers: list[AnswerDetail]
    created_at: datetime
    updated_at: datetime


class GetQuestionUseCase:
    """Use case for the question detail view."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Answers are returned in submission order, each with its score and
        the viewer's own vote.

        Args:
            request: Get question request

        Returns:
            Question detail

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("get_question.execute", question_id=request.question_id):
            question_id = QuestionId(UUID(request.question_id))
            question = await self.question_service.get_question_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", request.question_id)

            answers = await self.answer_service.get_answers_for_question(question_id)
            answer_ids = [answer.id for answer in answers]

            question_tally = await self.vote_service.get_tally(
                VotableType.QUESTION, question.id
            )
            answer_tallies = await self.vote_service.get_tallies(
                VotableType.ANSWER, answer_ids
            )

            # Viewer's own votes, batched (avoid N+1)
            question_vote = None
            answer_votes: dict[UUID, int | None] = {}
            if request.viewer:
                viewer_id = request.viewer.user_id
                values = await self.vote_service.get_voter_values(
                    viewer_id, VotableType.QUESTION, [question.id]
                )
                question_vote = values.get(question.id)
                answer_values = await self.vote_service.get_voter_values(
                    viewer_id, VotableType.ANSWER, answer_ids
                )
                answer_votes = {
                    aid: int(v) if v is not None else None
                    for aid, v in answer_values.items()
                }

            answer_items = []
            for answer in answers:
                tally = answer_tallies.get(answer.id, VoteTally())
                answer_items.append(
                    AnswerDetail(
                        answer_id=str(answer.id),
                        author_id=str(answer.author_id),
                        content=answer.content,
                        vote_count=tally.score,
                        total_votes=tally.total_voters,
                        user_vote=answer_votes.get(answer.id),
                        is_accepted=answer.id == question.accepted_answer_id,
                        created_at=answer.created_at,
                    )
                )

            return GetQuestionResponse(
                question_id=str(question.id),
                author_id=str(question.author_id),
                title=question.title,
                description=question.description,
                tags=question.tags,
                accepted_answer_id=(
                    str(question.accepted_answer_id)
                    if question.accepted_answer_id
                    else None
                ),
                vote_count=question_tally.score,
                total_votes=question_tally.total_voters,
                user_vote=int(question_vote) if question_vote is not None else None,
                answers=answer_items,
                created_at=question.created_at,
                updated_at=question.updated_at,
            )
