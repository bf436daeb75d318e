"""Use case base."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation: takes a request model, returns a response model."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        ...
