"""
Payment signature verification.

Razorpay signs checkout results with HMAC-SHA256 over
"<order_id>|<payment_id>" using the account key secret.
"""

import hashlib
import hmac


def compute_signature(order_id: str, payment_id: str, secret: str) -> str:
    """Return the hex HMAC-SHA256 the provider would send for this payment."""
    message = f"{order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_payment_signature(order_id: str, payment_id: str, signature: str, secret: str) -> bool:
    """Constant-time comparison of the expected and supplied signatures."""
    expected = compute_signature(order_id, payment_id, secret)
    return hmac.compare_digest(expected.encode("ascii"), (signature or "").encode("utf-8"))
