from functools import lru_cache

from agents.rafiki_agent.agent import RafikiTutor
from agents.study_content_agent.agent import StudyContentGenerator
from api.config import settings
from api.prompt_builders import (
    build_evaluation_prompt,
    build_flashcards_prompt,
    build_quiz_prompt,
    build_rafiki_suggestions_prompt,
    build_rafiki_system_prompt,
)
from infra.llm.ollama import OllamaLLM


@lru_cache(maxsize=1)
def get_llm() -> OllamaLLM:
    return OllamaLLM(
        model=settings.ollama_model,
        base_url=settings.ollama_base_url,
    )


def build_tutor(model: str | None = None) -> RafikiTutor:
    llm = OllamaLLM(model=model, base_url=settings.ollama_base_url) if model else get_llm()
    return RafikiTutor(
        name="Rafiki",
        llm=llm,
        build_system_prompt=build_rafiki_system_prompt,
        build_suggestions_prompt=build_rafiki_suggestions_prompt,
    )


def build_content_generator() -> StudyContentGenerator:
    return StudyContentGenerator(
        llm=get_llm(),
        build_flashcards_prompt=build_flashcards_prompt,
        build_quiz_prompt=build_quiz_prompt,
        build_evaluation_prompt=build_evaluation_prompt,
    )


@lru_cache(maxsize=1)
def get_tutor() -> RafikiTutor:
    """FastAPI dependency; tests override it with a fake tutor."""
    return build_tutor()


@lru_cache(maxsize=1)
def get_content_generator() -> StudyContentGenerator:
    """FastAPI dependency; tests override it with a fake generator."""
    return build_content_generator()
