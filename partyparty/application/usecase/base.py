"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: a request model in, a response model out.

    The signed-in identity travels on the request; use cases hold no state
    between calls.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
