"""
App prompt builders: build prompts for agents using library core template.
All prompt content and templates live here; agents receive builder callables at init.
"""

from api.prompt_builders.rafiki import build_rafiki_system_prompt, build_rafiki_suggestions_prompt
from api.prompt_builders.study_content import (
    build_evaluation_prompt,
    build_flashcards_prompt,
    build_quiz_prompt,
)

__all__ = [
    "build_rafiki_system_prompt",
    "build_rafiki_suggestions_prompt",
    "build_flashcards_prompt",
    "build_quiz_prompt",
    "build_evaluation_prompt",
]
