"""Google Gemini AI client implementation.

Handles Google's Gemini models via the langchain-google-genai package.
Requires a valid API key for authentication.
"""

import base64
import logging
from typing import Any, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from .base import AIClient, ChatTurn
from .exceptions import AIServiceError

logger = logging.getLogger(__name__)

TITLE_PROMPT = (
    'Generate a short, descriptive title (max 6 words) for a chat that '
    'starts with this message: "{message}"'
)


def build_history(history: Optional[list[ChatTurn]]) -> list[BaseMessage]:
    """Convert stored turns into LangChain messages Gemini will accept.

    Gemini requires the history to start with a user turn and to alternate
    user/model. Blank turns are dropped, a leading assistant turn is
    dropped, and only well-formed user→assistant pairs are kept.

    Args:
        history: Previous turns, oldest first

    Returns:
        Messages forming complete user/assistant pairs
    """
    turns = [t for t in (history or []) if t.content and t.content.strip()]

    if turns and turns[0].role != "user":
        turns = turns[1:]

    messages: list[BaseMessage] = []
    for i in range(0, len(turns) - 1, 2):
        first, second = turns[i], turns[i + 1]
        if first.role == "user" and second.role == "assistant":
            messages.append(HumanMessage(content=first.content.strip()))
            messages.append(AIMessage(content=second.content.strip()))
    return messages


def build_prompt_with_history(prompt: str, history: list[ChatTurn]) -> str:
    """Fold previous turns into a single prompt for the vision call."""
    history_text = "\n".join(
        f"{'AI' if turn.role == 'assistant' else 'User'}: {turn.content}"
        for turn in history
    )
    return (
        f"Previous conversation:\n{history_text}\n\n"
        f"Current question: {prompt}\n\n"
        "Please analyze the image and continue the conversation based on the previous context."
    )


def _response_text(response: Any) -> str:
    """Extract plain text from a chat model response."""
    content = getattr(response, "content", response)
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class GeminiClient(AIClient):
    """AI client for Google Gemini models.

    The same model serves text, vision and title generation.

    Available models:
        - gemini-1.5-flash (default, fast and multimodal)
        - gemini-2.0-flash
        - gemini-1.5-pro
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        default_title: str = "New Chat",
        llm: Optional[Any] = None,
    ):
        """
        Args:
            api_key: Google AI API key
            model: Gemini model identifier
            default_title: Title used when title generation fails
            llm: Pre-built chat model (tests pass a mock here)

        Raises:
            ValueError: If no llm is given and api_key is empty
        """
        if llm is None:
            if not api_key:
                raise ValueError(
                    "Google AI API key is required. "
                    "Set it via the GOOGLE_API_KEY environment variable."
                )
            llm = ChatGoogleGenerativeAI(model=model, google_api_key=api_key)
        self._llm = llm
        self._default_title = default_title

    async def generate_text(
        self,
        prompt: str,
        history: Optional[list[ChatTurn]] = None,
    ) -> str:
        messages = build_history(history)
        messages.append(HumanMessage(content=prompt))
        try:
            response = await self._llm.ainvoke(messages)
        except Exception as e:
            logger.error("Gemini text generation failed: %s", e)
            raise AIServiceError("Text generation failed", original_error=str(e)) from e
        return _response_text(response)

    async def generate_vision(
        self,
        prompt: str,
        image: bytes,
        mime_type: str = "image/jpeg",
        history: Optional[list[ChatTurn]] = None,
    ) -> str:
        if not image:
            raise AIServiceError("Image data is required for image analysis")

        text = build_prompt_with_history(prompt, history) if history else prompt
        encoded = base64.b64encode(image).decode("ascii")
        message = HumanMessage(
            content=[
                {"type": "text", "text": text},
                {"type": "image_url", "image_url": f"data:{mime_type};base64,{encoded}"},
            ]
        )
        try:
            response = await self._llm.ainvoke([message])
        except Exception as e:
            logger.error("Gemini image analysis failed: %s", e)
            raise AIServiceError("Image analysis failed", original_error=str(e)) from e
        return _response_text(response)

    async def generate_title(self, seed_message: str) -> str:
        try:
            response = await self._llm.ainvoke(
                [HumanMessage(content=TITLE_PROMPT.format(message=seed_message))]
            )
            title = _response_text(response).strip().strip('"').strip()
        except Exception as e:
            logger.warning("Chat title generation failed, using default: %s", e)
            return self._default_title
        return title or self._default_title
