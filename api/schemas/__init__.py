"""
API schemas package. Import from submodules or from this package.

Example:
    from api.schemas import SubmitQuizRequest, SubmitQuizResponse
    from api.schemas.quiz_schemas import SubmitQuizResponse
"""

from api.schemas.auth_schemas import (
    AuthTokenPayload,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
)
from api.schemas.user_schemas import User
from api.schemas.content_schemas import (
    SubjectResponse,
    StrandResponse,
    StrandWithUnlockResponse,
    TopicResponse,
)
from api.schemas.progress_schemas import (
    UserProgressResponse,
    UserStats,
    ProgressOverviewResponse,
)
from api.schemas.flashcard_schemas import (
    FlashcardWithProgress,
    FlashcardProgressRequest,
    SuccessResponse,
)
from api.schemas.quiz_schemas import (
    QuizResponse,
    QuizQuestionResponse,
    QuizWithQuestionsResponse,
    SubmitQuizRequest,
    QuizAttemptResponse,
    SubmitQuizResponse,
)
from api.schemas.homework_schemas import (
    HomeworkResponse,
    SubmitHomeworkRequest,
    GradeHomeworkRequest,
    HomeworkSubmissionResponse,
)
from api.schemas.chat_schemas import (
    ChatMessage,
    CreateChatSessionRequest,
    SendMessageRequest,
    ChatSessionResponse,
    SendMessageResponse,
)
from api.schemas.generation_schemas import (
    GenerateFlashcardsRequest,
    GenerateQuizRequest,
    EvaluateAnswerRequest,
    GeneratedFlashcardResponse,
    GeneratedQuestionResponse,
    AnswerEvaluationResponse,
)

__all__ = [
    # auth
    "AuthTokenPayload",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "RegisterRequest",
    "RegisterResponse",
    # user
    "User",
    # content
    "SubjectResponse",
    "StrandResponse",
    "StrandWithUnlockResponse",
    "TopicResponse",
    # progress
    "UserProgressResponse",
    "UserStats",
    "ProgressOverviewResponse",
    # flashcards
    "FlashcardWithProgress",
    "FlashcardProgressRequest",
    "SuccessResponse",
    # quizzes
    "QuizResponse",
    "QuizQuestionResponse",
    "QuizWithQuestionsResponse",
    "SubmitQuizRequest",
    "QuizAttemptResponse",
    "SubmitQuizResponse",
    # homework
    "HomeworkResponse",
    "SubmitHomeworkRequest",
    "GradeHomeworkRequest",
    "HomeworkSubmissionResponse",
    # chat
    "ChatMessage",
    "CreateChatSessionRequest",
    "SendMessageRequest",
    "ChatSessionResponse",
    "SendMessageResponse",
    # generation
    "GenerateFlashcardsRequest",
    "GenerateQuizRequest",
    "EvaluateAnswerRequest",
    "GeneratedFlashcardResponse",
    "GeneratedQuestionResponse",
    "AnswerEvaluationResponse",
]
