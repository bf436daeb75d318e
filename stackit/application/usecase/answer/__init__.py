"""Answer use cases."""

from .accept_answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
)
from .submit_answer import (
    SubmitAnswerRequest,
    SubmitAnswerResponse,
    SubmitAnswerUseCase,
)

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerResponse",
    "AcceptAnswerUseCase",
    "SubmitAnswerRequest",
    "SubmitAnswerResponse",
    "SubmitAnswerUseCase",
]
