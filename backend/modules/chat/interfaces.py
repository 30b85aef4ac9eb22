"""
Chat module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import UploadedFile

from .models import ChatHeading, ChatListResponse, ChatSession


@runtime_checkable
class IChatService(Protocol):
    """Interface for AI chat sessions."""

    async def start_session(
        self,
        owner_id: str,
        message: str,
        attachment: Optional[UploadedFile] = None,
    ) -> ChatSession:
        """
        Start a session with a first message and the AI reply.

        Raises:
            EmptyMessageError: If the message is blank
            UnsupportedAttachmentError: For attachments that aren't images or PDFs
            AIServiceError: If the AI call fails (nothing is stored)
        """
        ...

    async def continue_session(
        self,
        owner_id: str,
        session_id: str,
        message: str,
        attachment: Optional[UploadedFile] = None,
    ) -> ChatSession:
        """
        Add a message and the AI reply to an existing session.

        Raises:
            ChatNotFoundError: If the session is missing or owned by someone else
        """
        ...

    async def list_sessions(self, owner_id: str, page: int = 1, page_size: int = 10) -> ChatListResponse:
        ...

    async def list_all_sessions(self, owner_id: str) -> list[ChatHeading]:
        """Every session of the user, without messages, most recently active first."""
        ...

    async def get_session(self, owner_id: str, session_id: str) -> ChatSession:
        """
        Raises:
            ChatNotFoundError: If the session is missing or owned by someone else
        """
        ...
