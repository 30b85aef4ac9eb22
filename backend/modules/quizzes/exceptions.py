"""
Quiz module exceptions.
"""

from shared.exceptions import NotFoundError


class QuizNotFoundError(NotFoundError):
    def __init__(self, quiz_id: str):
        super().__init__(
            f"Quiz not found: {quiz_id}",
            code="QUIZ_NOT_FOUND",
            details={"quiz_id": quiz_id},
        )
