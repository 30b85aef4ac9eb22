"""Factory functions for creating external collaborators from settings."""

from supabase import Client

from shared.config import Settings

from .base import AIClient, BlobStorage, PaymentGateway


def build_blob_storage(settings: Settings, client: Client) -> BlobStorage:
    """Build the Supabase Storage backed blob store."""
    from .supabase_storage import SupabaseBlobStorage

    return SupabaseBlobStorage(
        client,
        bucket=settings.supabase_storage_bucket,
        prefix=settings.supabase_storage_prefix,
    )


def build_ai_client(settings: Settings) -> AIClient:
    """Build the Gemini AI client.

    Raises:
        ValueError: If GOOGLE_API_KEY is not configured
    """
    from .gemini import GeminiClient

    return GeminiClient(
        api_key=settings.google_api_key,
        model=settings.gemini_model,
        default_title=settings.default_chat_title,
    )


def build_payment_gateway(settings: Settings) -> PaymentGateway:
    """Build the Razorpay payment gateway."""
    from .razorpay import RazorpayGateway

    return RazorpayGateway(
        key_id=settings.razorpay_key_id,
        key_secret=settings.razorpay_key_secret,
        currency=settings.yearly_plan_currency,
        api_base=settings.razorpay_api_base,
        timeout=settings.razorpay_timeout_seconds,
    )
