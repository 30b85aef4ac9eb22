"""
Quiz repository for database access.

Questions are stored as a jsonb array on the quizzes table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Question, Quiz


class QuizRepository(BaseRepository[Quiz]):
    """Repository for quiz data access."""

    def create(self, title: str, questions: list[Question]) -> Quiz:
        now = self._now().isoformat()
        result = self._db.table("quizzes").insert({
            "title": title,
            "questions": [q.model_dump(mode="json") for q in questions],
            "created_at": now,
            "updated_at": now,
        }).execute()
        return self._map_to_quiz(result.data[0])

    def list_all(self) -> list[Quiz]:
        result = self._db.table("quizzes").select("*").order("created_at", desc=True).execute()
        return [self._map_to_quiz(row) for row in result.data]

    def get_by_id(self, quiz_id: str) -> Optional[Quiz]:
        if not self._is_uuid(quiz_id):
            return None
        result = self._db.table("quizzes").select("*").eq("id", quiz_id).execute()
        if not result.data:
            return None
        return self._map_to_quiz(result.data[0])

    def delete(self, quiz_id: str) -> bool:
        if not self._is_uuid(quiz_id):
            return False
        result = self._db.table("quizzes").delete().eq("id", quiz_id).execute()
        return bool(result.data)

    def _map_to_quiz(self, data: dict[str, Any]) -> Quiz:
        return Quiz(
            id=data["id"],
            title=data["title"],
            questions=[Question.model_validate(q) for q in data.get("questions") or []],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
