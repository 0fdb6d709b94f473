from agents.study_content_agent.agent import (
    AnswerEvaluation,
    GeneratedFlashcard,
    GeneratedQuestion,
    StudyContentGenerator,
)

__all__ = ["AnswerEvaluation", "GeneratedFlashcard", "GeneratedQuestion", "StudyContentGenerator"]
