"""
Quiz module interface.
"""

from typing import Protocol, runtime_checkable

from .models import CreateQuizRequest, Quiz, QuizSummary


@runtime_checkable
class IQuizService(Protocol):
    """Interface for quiz operations."""

    async def create_quiz(self, request: CreateQuizRequest) -> Quiz:
        ...

    async def list_quizzes(self) -> list[QuizSummary]:
        """List quizzes, newest first, without answers."""
        ...

    async def get_quiz(self, quiz_id: str) -> Quiz:
        """
        Get a quiz with its answers.

        Raises:
            QuizNotFoundError: If the quiz doesn't exist
        """
        ...

    async def delete_quiz(self, quiz_id: str) -> None:
        """
        Raises:
            QuizNotFoundError: If the quiz doesn't exist
        """
        ...
