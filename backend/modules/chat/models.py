"""
Chat module data models.

A chat session is an ordered log of messages. Messages are always added
in user/assistant pairs.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class MessageKind(str, Enum):
    """What the user attached to a message."""

    TEXT = "text"
    IMAGE = "image"


class ChatMessage(BaseModel):
    """A single message in a session."""

    role: MessageRole
    content: str
    content_kind: MessageKind = Field(default=MessageKind.TEXT)
    timestamp: datetime


class ChatSession(BaseModel):
    """A chat session with its full message log."""

    id: str = Field(..., description="Session ID (UUID)")
    owner_id: str = Field(..., description="Owning user ID")
    title: str
    messages: list[ChatMessage] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ChatHeading(BaseModel):
    """Session entry in the plain chat list."""

    id: str
    title: str
    created_at: datetime
    updated_at: datetime


class LastMessage(BaseModel):
    role: MessageRole
    content: str
    timestamp: datetime


class ChatSummary(BaseModel):
    """Session entry in the history listing."""

    id: str
    title: str
    created_at: datetime
    updated_at: datetime
    last_message: Optional[LastMessage] = None
    message_count: int = 0


class ChatListResponse(BaseModel):
    """Paginated session history, most recently active first."""

    items: list[ChatSummary]
    page: int
    page_size: int
    total: int
    total_pages: int
    has_more: bool


class ChatExchangeResponse(BaseModel):
    """Result of starting or continuing a session."""

    message: str
    chat: ChatSession
