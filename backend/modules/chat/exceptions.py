"""
Chat module exceptions.
"""

from typing import Optional

from shared.exceptions import NotFoundError, ValidationError


class ChatNotFoundError(NotFoundError):
    """
    Raised when a session doesn't exist or belongs to someone else.

    Both cases look the same to the caller.
    """

    def __init__(self, chat_id: str):
        super().__init__(
            f"Chat not found: {chat_id}",
            code="CHAT_NOT_FOUND",
            details={"chat_id": chat_id},
        )


class EmptyMessageError(ValidationError):
    def __init__(self):
        super().__init__("Message is required", code="MESSAGE_REQUIRED")


class UnsupportedAttachmentError(ValidationError):
    """Raised for attachments that are neither images nor PDFs, or unreadable PDFs."""

    def __init__(self, content_type: str, reason: Optional[str] = None):
        super().__init__(
            reason or f"Unsupported attachment type: {content_type}",
            code="UNSUPPORTED_ATTACHMENT",
            details={"content_type": content_type},
        )
