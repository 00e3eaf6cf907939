"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Use case taking one request model and answering with one response model.

    Domain errors are not caught here; routes map them to HTTP responses.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
