"""
Quiz API endpoints.

Anyone can browse quizzes; answers require a subscription; writes are
admin-only.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_quiz_service
from api.middleware.auth import require_admin, require_entitlement
from shared.models import AuthenticatedUser

from .interfaces import IQuizService
from .models import CreateQuizRequest, Quiz, QuizSummary

router = APIRouter()


@router.get("", response_model=list[QuizSummary])
async def list_quizzes(
    service: IQuizService = Depends(get_quiz_service),
) -> list[QuizSummary]:
    return await service.list_quizzes()


@router.post("", response_model=Quiz, status_code=201)
async def create_quiz(
    request: CreateQuizRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IQuizService = Depends(get_quiz_service),
) -> Quiz:
    return await service.create_quiz(request)


@router.get("/{quiz_id}", response_model=Quiz)
async def get_quiz(
    quiz_id: str,
    user: AuthenticatedUser = Depends(require_entitlement),
    service: IQuizService = Depends(get_quiz_service),
) -> Quiz:
    """
    Get a quiz including correct answers. Requires an active subscription.
    """
    return await service.get_quiz(quiz_id)


@router.delete("/{quiz_id}", status_code=204)
async def delete_quiz(
    quiz_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IQuizService = Depends(get_quiz_service),
) -> None:
    await service.delete_quiz(quiz_id)
