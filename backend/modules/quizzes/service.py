"""
Quiz service implementation.
"""

import logging

from .exceptions import QuizNotFoundError
from .interfaces import IQuizService
from .models import CreateQuizRequest, PublicQuestion, Quiz, QuizSummary
from .repository import QuizRepository

logger = logging.getLogger(__name__)


class QuizService(IQuizService):
    def __init__(self, repository: QuizRepository):
        self._repository = repository

    async def create_quiz(self, request: CreateQuizRequest) -> Quiz:
        quiz = self._repository.create(request.title.strip(), request.questions)
        logger.info("Created quiz %s with %d questions", quiz.id, len(quiz.questions))
        return quiz

    async def list_quizzes(self) -> list[QuizSummary]:
        return [
            QuizSummary(
                id=quiz.id,
                title=quiz.title,
                question_count=len(quiz.questions),
                questions=[PublicQuestion(text=q.text, options=q.options) for q in quiz.questions],
                created_at=quiz.created_at,
            )
            for quiz in self._repository.list_all()
        ]

    async def get_quiz(self, quiz_id: str) -> Quiz:
        quiz = self._repository.get_by_id(quiz_id)
        if quiz is None:
            raise QuizNotFoundError(quiz_id)
        return quiz

    async def delete_quiz(self, quiz_id: str) -> None:
        if not self._repository.delete(quiz_id):
            raise QuizNotFoundError(quiz_id)
        logger.info("Deleted quiz %s", quiz_id)
