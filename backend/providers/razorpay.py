"""Razorpay payment gateway implementation.

Talks to the Razorpay REST API (https://razorpay.com/docs/api/) with HTTP
basic auth. Payment signature verification is done locally by the billing
module and never goes through this client.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from .base import PaymentGateway, PaymentOrder
from .exceptions import PaymentProviderError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.razorpay.com/v1"


class RazorpayGateway(PaymentGateway):
    """Payment gateway backed by Razorpay orders and subscriptions."""

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        currency: str = "INR",
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            key_id: Razorpay key ID
            key_secret: Razorpay key secret
            currency: Currency for created orders
            api_base: API root URL
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self._key_id = key_id
        self._key_secret = key_secret
        self._currency = currency
        self._api_base = api_base
        self._timeout = timeout
        self._transport = transport

    @property
    def key_id(self) -> str:
        return self._key_id

    async def _post(self, path: str, payload: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        if not self._key_id or not self._key_secret:
            raise PaymentProviderError(
                "Payment provider not configured. "
                "Set RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET environment variables."
            )

        async with httpx.AsyncClient(
            base_url=self._api_base,
            auth=(self._key_id, self._key_secret),
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(path, json=payload or {})
            except httpx.HTTPError as e:
                logger.error("Razorpay request to %s failed: %s", path, e)
                raise PaymentProviderError(
                    "Payment provider unreachable",
                    provider_error=str(e),
                ) from e

        if response.status_code >= 400:
            description = None
            try:
                description = response.json().get("error", {}).get("description")
            except ValueError:
                description = response.text or None
            logger.error(
                "Razorpay %s returned %s: %s", path, response.status_code, description
            )
            raise PaymentProviderError(
                "Payment provider rejected the request",
                status_code=response.status_code,
                provider_error=description,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error("Razorpay %s returned a non-JSON body: %.200s", path, response.text)
            raise PaymentProviderError(
                "Payment provider sent an unreadable response",
                status_code=response.status_code,
            ) from e

    async def create_order(
        self,
        amount_minor: int,
        receipt: str,
        notes: Optional[dict[str, Any]] = None,
    ) -> PaymentOrder:
        data = await self._post(
            "/orders",
            {
                "amount": amount_minor,
                "currency": self._currency,
                "receipt": receipt,
                "notes": notes or {},
                "payment_capture": 1,
            },
        )
        try:
            return PaymentOrder(
                id=data["id"],
                amount=data["amount"],
                currency=data.get("currency", self._currency),
                receipt=data.get("receipt"),
                notes=data.get("notes") or {},
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            logger.error("Razorpay order response is missing fields: %s", e)
            raise PaymentProviderError("Payment provider sent an incomplete order") from e

    async def cancel_subscription(self, subscription_id: str) -> None:
        await self._post(f"/subscriptions/{subscription_id}/cancel")
