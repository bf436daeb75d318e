"""List questions use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from stackit.config import PaginationSettings
from stackit.domain.service import QuestionService, VoteService
from stackit.domain.value import VotableType, VoteTally


class QuestionListItem(BaseModel):
    """Question list item in response."""

    question_id: str
    author_id: str
    title: str
    tags: list[str]
    answer_count: int
    vote_count: int
    is_accepted: bool
    created_at: datetime


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)  # None: configured default
    tag: str | None = None


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    total_pages: int
    current_page: int


class ListQuestionsUseCase:
    """Use case for browsing questions newest first."""

    def __init__(
        self,
        question_service: QuestionService,
        vote_service: VoteService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            vote_service: Vote domain service
            pagination_settings: Page size defaults and cap
        """
        self.question_service = question_service
        self.vote_service = vote_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with page, page size and tag filter

        Returns:
            One page of questions plus the page count
        """
        limit = min(
            request.limit or self.pagination_settings.default_limit,
            self.pagination_settings.max_limit,
        )

        questions, total_pages = await self.question_service.list_questions(
            page=request.page, limit=limit, tag=request.tag
        )

        tallies = await self.vote_service.get_tallies(
            VotableType.QUESTION, [q.id for q in questions]
        )

        items = [
            QuestionListItem(
                question_id=str(q.id),
                author_id=str(q.author_id),
                title=q.title,
                tags=q.tags,
                answer_count=len(q.answer_ids),
                vote_count=tallies.get(q.id, VoteTally()).score,
                is_accepted=q.is_accepted,
                created_at=q.created_at,
            )
            for q in questions
        ]

        logfire.info("Questions page served", page=request.page, count=len(items))

        return ListQuestionsResponse(
            questions=items,
            total_pages=total_pages,
            current_page=request.page,
        )
