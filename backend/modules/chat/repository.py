"""
Chat repository for database access.

Sessions live in the chat_sessions table with their messages in a jsonb
array column.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import ChatHeading, ChatMessage, ChatSession


class ChatRepository(BaseRepository[ChatSession]):
    """
    Repository for chat session data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    def create(self, owner_id: str, title: str, messages: list[ChatMessage]) -> ChatSession:
        """
        Create a session with its first messages.

        updated_at is set to the newest message timestamp.
        """
        now = self._now()
        updated_at = max((m.timestamp for m in messages), default=now)
        result = self._db.table("chat_sessions").insert({
            "owner_id": owner_id,
            "title": title,
            "messages": [m.model_dump(mode="json") for m in messages],
            "created_at": now.isoformat(),
            "updated_at": updated_at.isoformat(),
        }).execute()
        return self._map_to_session(result.data[0])

    def get_by_id(self, chat_id: str) -> Optional[ChatSession]:
        if not self._is_uuid(chat_id):
            return None
        result = self._db.table("chat_sessions").select("*").eq("id", chat_id).execute()
        if not result.data:
            return None
        return self._map_to_session(result.data[0])

    def append_messages(self, session: ChatSession, messages: list[ChatMessage]) -> ChatSession:
        """
        Append messages to a session and refresh updated_at.

        Args:
            session: The session as last read.
            messages: New messages, oldest first.
        """
        all_messages = [*session.messages, *messages]
        updated_at = max(m.timestamp for m in all_messages)
        result = (
            self._db.table("chat_sessions")
            .update({
                "messages": [m.model_dump(mode="json") for m in all_messages],
                "updated_at": updated_at.isoformat(),
            })
            .eq("id", session.id)
            .execute()
        )
        return self._map_to_session(result.data[0])

    def list_for_owner(self, owner_id: str, page: int = 1, page_size: int = 10) -> tuple[list[ChatSession], int]:
        """
        List a user's sessions, most recently updated first.

        Returns:
            The page of sessions and the total session count.
        """
        offset = (page - 1) * page_size
        result = (
            self._db.table("chat_sessions")
            .select("*", count="exact")
            .eq("owner_id", owner_id)
            .order("updated_at", desc=True)
            .range(offset, offset + page_size - 1)
            .execute()
        )
        sessions = [self._map_to_session(row) for row in result.data]
        return sessions, result.count or 0

    def list_headings(self, owner_id: str) -> list[ChatHeading]:
        """All of a user's sessions without messages, most recently updated first."""
        result = (
            self._db.table("chat_sessions")
            .select("id, title, created_at, updated_at")
            .eq("owner_id", owner_id)
            .order("updated_at", desc=True)
            .execute()
        )
        return [
            ChatHeading(
                id=row["id"],
                title=row.get("title") or "",
                created_at=row["created_at"],
                updated_at=row["updated_at"],
            )
            for row in result.data
        ]

    def _map_to_session(self, data: dict[str, Any]) -> ChatSession:
        return ChatSession(
            id=data["id"],
            owner_id=data["owner_id"],
            title=data.get("title") or "",
            messages=[ChatMessage.model_validate(m) for m in data.get("messages") or []],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
