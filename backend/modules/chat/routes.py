"""
Chat API endpoints.

Starting and continuing a chat require an active subscription; reading
history only requires a login. chats_router is mounted at the root for
GET /api/chats.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from api.dependencies import get_chat_service, get_settings_dependency
from api.middleware.auth import get_current_user, require_entitlement
from api.uploads import read_upload
from shared.config import Settings
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser, UploadedFile

from .interfaces import IChatService
from .models import ChatExchangeResponse, ChatHeading, ChatListResponse, ChatSession

router = APIRouter()
chats_router = APIRouter()


async def _attachment(
    image: Optional[UploadFile],
    pdf: Optional[UploadFile],
    max_bytes: int,
) -> Optional[UploadedFile]:
    image_file = await read_upload(image, max_bytes)
    pdf_file = await read_upload(pdf, max_bytes)
    if image_file and pdf_file:
        raise ValidationError(
            "Attach either an image or a PDF, not both",
            code="TOO_MANY_ATTACHMENTS",
        )
    return image_file or pdf_file


@router.post("/start", response_model=ChatExchangeResponse, status_code=201)
async def start_chat(
    message: str = Form(""),
    image: Optional[UploadFile] = File(None),
    pdf: Optional[UploadFile] = File(None),
    user: AuthenticatedUser = Depends(require_entitlement),
    service: IChatService = Depends(get_chat_service),
    settings: Settings = Depends(get_settings_dependency),
) -> ChatExchangeResponse:
    """
    Start a new chat with an optional image or PDF.
    """
    attachment = await _attachment(image, pdf, settings.max_attachment_bytes)
    session = await service.start_session(user.id, message, attachment)
    return ChatExchangeResponse(message="Chat started successfully", chat=session)


@router.get("/history", response_model=ChatListResponse)
async def chat_history(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=10, ge=1, le=100, description="Items per page"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IChatService = Depends(get_chat_service),
) -> ChatListResponse:
    """
    List the current user's chats, most recently active first.
    """
    return await service.list_sessions(user.id, page, limit)


@router.post("/{chat_id}/message", response_model=ChatExchangeResponse)
async def send_message(
    chat_id: str,
    message: str = Form(""),
    image: Optional[UploadFile] = File(None),
    pdf: Optional[UploadFile] = File(None),
    user: AuthenticatedUser = Depends(require_entitlement),
    service: IChatService = Depends(get_chat_service),
    settings: Settings = Depends(get_settings_dependency),
) -> ChatExchangeResponse:
    """
    Continue a chat. The last messages of the chat are sent as context.
    """
    attachment = await _attachment(image, pdf, settings.max_attachment_bytes)
    session = await service.continue_session(user.id, chat_id, message, attachment)
    return ChatExchangeResponse(message="Message sent successfully", chat=session)


@router.get("/{chat_id}", response_model=ChatSession)
async def get_chat(
    chat_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IChatService = Depends(get_chat_service),
) -> ChatSession:
    return await service.get_session(user.id, chat_id)


@chats_router.get("/api/chats", response_model=list[ChatHeading])
async def list_chats(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IChatService = Depends(get_chat_service),
) -> list[ChatHeading]:
    """
    List all of the current user's chats by title, most recently active first.
    """
    return await service.list_all_sessions(user.id)
