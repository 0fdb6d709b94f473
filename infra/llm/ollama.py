import asyncio
import logging
import time
from typing import Any, AsyncIterator, Type, TypeVar

from langchain_ollama import ChatOllama
from langchain_ollama import OllamaLLM as LangChainOllamaLLM
from pydantic import BaseModel

from agents.core.llm import LLM

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger("cbc_learning.llm")

DEFAULT_TIMEOUT = 60.0
DEFAULT_STRUCTURED_TIMEOUT = 60.0


class OllamaLLM(LLM):
    def __init__(
        self,
        model: str,
        temperature: float = 0.7,
        base_url: str = "http://localhost:11434",
        num_predict: int | None = 500,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.model = model
        self.timeout = timeout
        # Avoid infinite recursion: this wrapper is `OllamaLLM`, the LangChain class is aliased.
        self._llm = LangChainOllamaLLM(model=model, temperature=temperature, base_url=base_url, num_predict=num_predict)
        # ChatOllama carries structured output (LangChain's recommended approach)
        self._chat_llm = ChatOllama(model=model, temperature=temperature, base_url=base_url)

    def generate(self, prompt: str) -> str:
        return self._llm.invoke(prompt)

    async def agenerate(self, prompt: str) -> str:
        start = time.time()
        result = await asyncio.wait_for(self._llm.ainvoke(prompt), timeout=self.timeout)
        logger.debug("ollama generate model=%s elapsed=%.2fs", self.model, time.time() - start)
        return result if isinstance(result, str) else str(result)

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        # LangChain astream yields chunk objects; normalize to plain text.
        async for chunk in self._llm.astream(prompt):
            text = getattr(chunk, "content", None)
            yield text if isinstance(text, str) else str(chunk)

    async def generate_structured(
        self,
        prompt: str,
        schema: Type[T],
        timeout: float = DEFAULT_STRUCTURED_TIMEOUT,
        **kwargs: Any,
    ) -> T:
        """Run the prompt through ChatOllama.with_structured_output and return a schema instance."""
        runnable = self._chat_llm.with_structured_output(schema, **kwargs)
        start = time.time()
        try:
            result = await asyncio.wait_for(runnable.ainvoke(prompt), timeout=timeout)
        except asyncio.TimeoutError:
            logger.error("ollama structured call timed out after %.2fs (timeout=%ss)", time.time() - start, timeout)
            raise TimeoutError(f"LLM call timed out after {timeout}s") from None
        logger.debug("ollama structured model=%s elapsed=%.2fs", self.model, time.time() - start)
        if isinstance(result, dict):
            return schema.model_validate(result)
        return result
