"""
Chat module.

AI-assisted chat sessions with text, image and PDF input.

Public API:
- IChatService: Interface for chat operations
- ChatSession / ChatMessage: Session models
- Chat exceptions: ChatNotFoundError, etc.
"""

from .interfaces import IChatService
from .models import ChatHeading, ChatMessage, ChatSession, ChatSummary, ChatListResponse, MessageKind, MessageRole
from .exceptions import ChatNotFoundError, EmptyMessageError, UnsupportedAttachmentError

__all__ = [
    # Interface
    "IChatService",
    # Models
    "ChatMessage",
    "ChatSession",
    "ChatSummary",
    "ChatHeading",
    "ChatListResponse",
    "MessageKind",
    "MessageRole",
    # Exceptions
    "ChatNotFoundError",
    "EmptyMessageError",
    "UnsupportedAttachmentError",
]
