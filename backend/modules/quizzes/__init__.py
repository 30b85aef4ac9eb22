"""
Quizzes module.

Multiple-choice quizzes managed by admins.
"""

from .interfaces import IQuizService
from .models import Question, Quiz, QuizSummary, CreateQuizRequest
from .exceptions import QuizNotFoundError

__all__ = [
    "IQuizService",
    "Question",
    "Quiz",
    "QuizSummary",
    "CreateQuizRequest",
    "QuizNotFoundError",
]
