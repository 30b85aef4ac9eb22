"""
Builders for test data.

Records are written through the real repositories so they have the same
shape the services read back.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from shared.config import Settings
from shared.models import Role
from modules.auth.models import UserAccount
from modules.auth.passwords import hash_password
from modules.auth.repository import UserRepository
from modules.billing.models import PaymentRecord, Plan, Subscription
from modules.billing.repository import BillingRepository
from modules.categories.models import CategoryNode, NodeKind
from modules.categories.repository import CategoryRepository

TEST_PASSWORD = "correct-horse"


def create_test_token(
    settings: Settings,
    user_id: str,
    role: Role = Role.USER,
    token_epoch: int = 0,
    expired: bool = False,
) -> str:
    """Create a signed token the way AuthService issues them."""
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    payload = {
        "sub": user_id,
        "role": role.value,
        "token_epoch": token_epoch,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def create_node(
    db,
    name: str,
    parent: Optional[CategoryNode] = None,
    kind: NodeKind = NodeKind.CATEGORY,
) -> CategoryNode:
    path = [*parent.path, name] if parent else [name]
    return CategoryRepository(db).create(
        name=name,
        path=path,
        kind=kind,
        parent_id=parent.id if parent else None,
    )


def create_account(
    db,
    email: str = "student@example.com",
    name: str = "Student",
    role: Role = Role.USER,
    password: str = TEST_PASSWORD,
    parent_category_id: Optional[str] = None,
    sub_category_id: Optional[str] = None,
    subscription: Optional[Subscription] = None,
) -> UserAccount:
    """Insert a principal, optionally with a subscription already in place."""
    users = UserRepository(db)
    account = users.create(
        name=name,
        email=email,
        password_hash=hash_password(password, rounds=4),
        role=role,
        parent_category_id=parent_category_id,
        sub_category_id=sub_category_id,
    )
    if subscription is not None:
        BillingRepository(db).save_subscription(account.id, subscription)
        account = users.get_by_id(account.id)
    return account


def active_subscription(days_left: int = 200, amount: float = 499.0) -> Subscription:
    now = datetime.now(timezone.utc)
    start = now - timedelta(days=365 - days_left)
    return Subscription(
        is_subscribed=True,
        plan=Plan.YEARLY,
        start_date=start,
        end_date=now + timedelta(days=days_left),
        payment_history=[
            PaymentRecord(external_payment_id="pay_active", amount=amount, date=start),
        ],
    )


def expired_subscription() -> Subscription:
    now = datetime.now(timezone.utc)
    return Subscription(
        is_subscribed=True,
        plan=Plan.YEARLY,
        start_date=now - timedelta(days=400),
        end_date=now - timedelta(days=35),
        payment_history=[
            PaymentRecord(
                external_payment_id="pay_expired",
                amount=499.0,
                date=now - timedelta(days=400),
            ),
        ],
    )


def cancelled_subscription() -> Subscription:
    now = datetime.now(timezone.utc)
    return Subscription(
        is_subscribed=False,
        plan=Plan.YEARLY,
        start_date=now - timedelta(days=30),
        end_date=now - timedelta(days=1),
        payment_history=[
            PaymentRecord(
                external_payment_id="pay_cancelled",
                amount=499.0,
                date=now - timedelta(days=30),
            ),
        ],
    )
