"""
Domain errors raised by services. Routes let them propagate; api.api maps
each one to an HTTP status through registered exception handlers.
"""

from typing import Any, Optional


class DomainError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(DomainError):
    """Referenced subject/strand/topic/quiz/homework/session is absent."""
    status_code = 404

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class ValidationFailure(DomainError):
    status_code = 400

    def __init__(self, detail: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(detail)
        self.errors = errors or []


class AttemptLimitReached(DomainError):
    status_code = 409

    def __init__(self, quiz_id: int, max_attempts: int):
        super().__init__(f"Maximum of {max_attempts} attempts reached for quiz {quiz_id}")
        self.quiz_id = quiz_id
        self.max_attempts = max_attempts
