"""External collaborator implementations (storage, AI, payments)."""

from .base import AIClient, BlobStorage, ChatTurn, PaymentGateway, PaymentOrder
from .exceptions import AIServiceError, PaymentProviderError, StorageError
from .factory import build_ai_client, build_blob_storage, build_payment_gateway

__all__ = [
    "AIClient",
    "BlobStorage",
    "ChatTurn",
    "PaymentGateway",
    "PaymentOrder",
    "AIServiceError",
    "PaymentProviderError",
    "StorageError",
    "build_ai_client",
    "build_blob_storage",
    "build_payment_gateway",
]
