from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Type, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class LLM(ABC):
    """
    Defines the contract for all LLMs.
    """
    @abstractmethod
    def generate(self, prompt: str) -> str:
        raise NotImplementedError

    @abstractmethod
    async def agenerate(self, prompt: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def stream(self, prompt: str) -> AsyncIterator[str]:
        raise NotImplementedError

    @abstractmethod
    async def generate_structured(self, prompt: str, schema: Type[T], **kwargs: Any) -> T:
        raise NotImplementedError
