"""
Collaborator exceptions.

All of these surface to clients as 503 through the ExternalServiceError base.
Upstream error text is kept on the exception for logging; the response body
only names the failing service.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class StorageError(ExternalServiceError):
    """Raised when an upload to blob storage fails."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(message, service="storage", code="STORAGE_ERROR")
        self.original_error = original_error


class AIServiceError(ExternalServiceError):
    """Raised when the AI model call fails."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(message, service="ai", code="AI_SERVICE_ERROR")
        self.original_error = original_error


class PaymentProviderError(ExternalServiceError):
    """Raised when the payment provider rejects or fails a request."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        provider_error: Optional[str] = None,
    ):
        super().__init__(message, service="payments", code="PAYMENT_PROVIDER_ERROR")
        self.upstream_status = status_code
        self.provider_error = provider_error
