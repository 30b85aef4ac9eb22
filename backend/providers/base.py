"""Base classes and models for external collaborators.

Services never construct these themselves; concrete implementations are
built by the service container and passed in, so tests can swap in fakes.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    """A previous message handed to the AI client as context.

    Attributes:
        role: "user" or "assistant"
        content: Message text
    """

    model_config = {"frozen": True}

    role: str
    content: str


class PaymentOrder(BaseModel):
    """Order created at the payment provider.

    Attributes:
        id: Provider order ID (e.g., "order_Nx...")
        amount: Amount in minor units (paise)
        currency: ISO currency code
        receipt: Receipt ID supplied when creating the order
    """

    id: str
    amount: int
    currency: str
    receipt: Optional[str] = None
    notes: dict[str, Any] = Field(default_factory=dict)


class BlobStorage(ABC):
    """Stores uploaded bytes and hands back a retrievable URL."""

    @abstractmethod
    def put(
        self,
        data: bytes,
        suggested_key: str,
        content_type: Optional[str] = None,
    ) -> str:
        """Upload bytes under a key.

        Args:
            data: Raw file content
            suggested_key: Object key; implementations may prefix it
            content_type: MIME type to store with the object

        Returns:
            A URL the stored object can be fetched from

        Raises:
            StorageError: On transport or credential failure
        """
        pass


class AIClient(ABC):
    """Text and vision generation used by the chat module."""

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        history: Optional[list[ChatTurn]] = None,
    ) -> str:
        """Generate a reply to a text prompt.

        Raises:
            AIServiceError: If the model call fails
        """
        pass

    @abstractmethod
    async def generate_vision(
        self,
        prompt: str,
        image: bytes,
        mime_type: str = "image/jpeg",
        history: Optional[list[ChatTurn]] = None,
    ) -> str:
        """Generate a reply to a prompt about an image.

        Raises:
            AIServiceError: If the model call fails
        """
        pass

    @abstractmethod
    async def generate_title(self, seed_message: str) -> str:
        """Generate a short title for a conversation.

        Never raises; implementations fall back to a default title.
        """
        pass


class PaymentGateway(ABC):
    """Order creation and subscription cancellation at the payment provider."""

    @property
    @abstractmethod
    def key_id(self) -> str:
        """Public key ID the frontend checkout widget needs."""
        pass

    @abstractmethod
    async def create_order(
        self,
        amount_minor: int,
        receipt: str,
        notes: Optional[dict[str, Any]] = None,
    ) -> PaymentOrder:
        """Create a one-time payment order.

        Raises:
            PaymentProviderError: If the provider call fails
        """
        pass

    @abstractmethod
    async def cancel_subscription(self, subscription_id: str) -> None:
        """Cancel a recurring subscription at the provider.

        Raises:
            PaymentProviderError: If the provider call fails
        """
        pass
