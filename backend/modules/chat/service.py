"""
Chat service implementation.

Routes each message to the AI client (text, vision, or text with
extracted PDF content), then stores the user turn and the reply.
"""

import io
import logging
import math
from datetime import datetime, timezone
from typing import Optional

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from shared.config import Settings, get_settings
from shared.models import UploadedFile
from providers.base import AIClient, ChatTurn

from .exceptions import ChatNotFoundError, EmptyMessageError, UnsupportedAttachmentError
from .interfaces import IChatService
from .models import (
    ChatHeading,
    ChatListResponse,
    ChatMessage,
    ChatSession,
    ChatSummary,
    LastMessage,
    MessageKind,
    MessageRole,
)
from .repository import ChatRepository

logger = logging.getLogger(__name__)

PDF_PROMPT_SEPARATOR = "\n\nAnalyze this PDF content: "


def extract_pdf_text(data: bytes) -> str:
    """
    Extract the text layer of a PDF.

    Raises:
        UnsupportedAttachmentError: If the bytes aren't a readable PDF
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except (PyPdfError, ValueError, KeyError, TypeError) as e:
        logger.warning("Could not read PDF attachment: %s", e)
        raise UnsupportedAttachmentError("application/pdf", reason="Could not read PDF") from e
    return "\n".join(p for p in pages if p).strip()


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ChatService(IChatService):
    """
    Implementation of the chat service.

    Only the last few messages of a session are sent to the model as
    context; the window size comes from settings.
    """

    def __init__(
        self,
        repository: ChatRepository,
        ai: AIClient,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._ai = ai
        self._settings = settings or get_settings()

    async def _reply(
        self,
        message: str,
        attachment: Optional[UploadedFile],
        history: list[ChatTurn],
    ) -> tuple[MessageKind, str]:
        """Ask the model for a reply. Returns the user message kind and the reply."""
        if attachment is None:
            return MessageKind.TEXT, await self._ai.generate_text(message, history)

        content_type = (attachment.content_type or "").lower()
        if content_type.startswith("image/"):
            reply = await self._ai.generate_vision(
                message, attachment.data, mime_type=content_type, history=history
            )
            return MessageKind.IMAGE, reply

        if content_type == "application/pdf":
            prompt = message + PDF_PROMPT_SEPARATOR + extract_pdf_text(attachment.data)
            return MessageKind.TEXT, await self._ai.generate_text(prompt, history)

        raise UnsupportedAttachmentError(content_type or "unknown")

    @staticmethod
    def _check_message(message: str) -> str:
        if not message or not message.strip():
            raise EmptyMessageError()
        return message.strip()

    async def start_session(
        self,
        owner_id: str,
        message: str,
        attachment: Optional[UploadedFile] = None,
    ) -> ChatSession:
        message = self._check_message(message)

        sent_at = _now()
        kind, reply = await self._reply(message, attachment, history=[])
        replied_at = _now()
        title = await self._ai.generate_title(message) or self._settings.default_chat_title

        session = self._repository.create(
            owner_id,
            title,
            [
                ChatMessage(role=MessageRole.USER, content=message, content_kind=kind, timestamp=sent_at),
                ChatMessage(role=MessageRole.ASSISTANT, content=reply, timestamp=replied_at),
            ],
        )
        logger.info("Started chat %s for user %s", session.id, owner_id)
        return session

    async def continue_session(
        self,
        owner_id: str,
        session_id: str,
        message: str,
        attachment: Optional[UploadedFile] = None,
    ) -> ChatSession:
        message = self._check_message(message)
        session = await self.get_session(owner_id, session_id)

        window = self._settings.chat_context_window
        history = [
            ChatTurn(role=m.role.value, content=m.content)
            for m in session.messages[-window:]
        ] if window > 0 else []

        sent_at = _now()
        kind, reply = await self._reply(message, attachment, history)
        replied_at = _now()

        return self._repository.append_messages(
            session,
            [
                ChatMessage(role=MessageRole.USER, content=message, content_kind=kind, timestamp=sent_at),
                ChatMessage(role=MessageRole.ASSISTANT, content=reply, timestamp=replied_at),
            ],
        )

    async def list_sessions(self, owner_id: str, page: int = 1, page_size: int = 10) -> ChatListResponse:
        sessions, total = self._repository.list_for_owner(owner_id, page, page_size)

        items = []
        for session in sessions:
            last = session.messages[-1] if session.messages else None
            items.append(ChatSummary(
                id=session.id,
                title=session.title,
                created_at=session.created_at,
                updated_at=session.updated_at,
                last_message=LastMessage(
                    role=last.role,
                    content=last.content,
                    timestamp=last.timestamp,
                ) if last else None,
                message_count=len(session.messages),
            ))

        return ChatListResponse(
            items=items,
            page=page,
            page_size=page_size,
            total=total,
            total_pages=math.ceil(total / page_size) if page_size else 0,
            has_more=page * page_size < total,
        )

    async def list_all_sessions(self, owner_id: str) -> list[ChatHeading]:
        return self._repository.list_headings(owner_id)

    async def get_session(self, owner_id: str, session_id: str) -> ChatSession:
        session = self._repository.get_by_id(session_id)
        if session is None or session.owner_id != owner_id:
            raise ChatNotFoundError(session_id)
        return session
