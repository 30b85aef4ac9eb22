"""
In-memory stand-ins for Supabase and the external collaborators.

FakeSupabaseClient implements the subset of the supabase-py query builder
the repositories use: table().select/insert/update/delete, the eq/neq/is_/
in_ filters, order, range, limit and execute() returning .data/.count.
"""

import copy
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from providers.base import AIClient, BlobStorage, ChatTurn, PaymentGateway, PaymentOrder
from providers.exceptions import AIServiceError, PaymentProviderError, StorageError


@dataclass
class FakeResponse:
    data: list[dict[str, Any]]
    count: Optional[int] = None


class FakeQuery:
    def __init__(self, client: "FakeSupabaseClient", table: str):
        self._client = client
        self._table = table
        self._action = "select"
        self._columns = "*"
        self._count = None
        self._payload: Any = None
        self._filters: list = []
        self._orders: list[tuple[str, bool]] = []
        self._range: Optional[tuple[int, int]] = None
        self._limit: Optional[int] = None

    # Actions

    def select(self, columns: str = "*", count: Optional[str] = None) -> "FakeQuery":
        self._action = "select"
        self._columns = columns
        self._count = count
        return self

    def insert(self, payload) -> "FakeQuery":
        self._action = "insert"
        self._payload = payload
        return self

    def update(self, payload: dict[str, Any]) -> "FakeQuery":
        self._action = "update"
        self._payload = payload
        return self

    def delete(self) -> "FakeQuery":
        self._action = "delete"
        return self

    # Filters

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append(lambda row: row.get(column) == value)
        return self

    def neq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append(lambda row: row.get(column) != value)
        return self

    def is_(self, column: str, value: str) -> "FakeQuery":
        if value == "null":
            self._filters.append(lambda row: row.get(column) is None)
        else:
            self._filters.append(lambda row: str(row.get(column)).lower() == value)
        return self

    def in_(self, column: str, values: list[Any]) -> "FakeQuery":
        allowed = list(values)
        self._filters.append(lambda row: row.get(column) in allowed)
        return self

    # Modifiers

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._orders.append((column, desc))
        return self

    def range(self, start: int, end: int) -> "FakeQuery":
        self._range = (start, end)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self._limit = size
        return self

    # Execution

    def _matches(self, row: dict[str, Any]) -> bool:
        return all(f(row) for f in self._filters)

    def _project(self, row: dict[str, Any]) -> dict[str, Any]:
        if self._columns.strip() == "*":
            return copy.deepcopy(row)
        columns = [c.strip() for c in self._columns.split(",")]
        return {c: copy.deepcopy(row.get(c)) for c in columns}

    def execute(self) -> FakeResponse:
        self._client.calls.append((self._table, self._action))
        rows = self._client.tables.setdefault(self._table, [])

        if self._action == "insert":
            payload = self._payload if isinstance(self._payload, list) else [self._payload]
            inserted = []
            for item in payload:
                row = copy.deepcopy(item)
                row.setdefault("id", str(uuid.uuid4()))
                rows.append(row)
                inserted.append(copy.deepcopy(row))
            return FakeResponse(data=inserted)

        if self._action == "update":
            updated = []
            for row in rows:
                if self._matches(row):
                    row.update(copy.deepcopy(self._payload))
                    updated.append(copy.deepcopy(row))
            return FakeResponse(data=updated)

        if self._action == "delete":
            deleted = [row for row in rows if self._matches(row)]
            self._client.tables[self._table] = [row for row in rows if not self._matches(row)]
            return FakeResponse(data=copy.deepcopy(deleted))

        selected = [row for row in rows if self._matches(row)]
        for column, desc in reversed(self._orders):
            selected.sort(
                key=lambda row: (row.get(column) is None, row.get(column) or ""),
                reverse=desc,
            )
        total = len(selected)
        if self._range is not None:
            start, end = self._range
            selected = selected[start:end + 1]
        if self._limit is not None:
            selected = selected[:self._limit]
        return FakeResponse(
            data=[self._project(row) for row in selected],
            count=total if self._count else None,
        )


class FakeSupabaseClient:
    """Dict-of-lists database with a supabase-py shaped query API."""

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple[str, str]] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rows(self, name: str) -> list[dict[str, Any]]:
        return self.tables.get(name, [])


class FakeBlobStorage(BlobStorage):
    def __init__(self, fail: bool = False):
        self.objects: dict[str, tuple[bytes, Optional[str]]] = {}
        self.fail = fail

    def put(self, data: bytes, suggested_key: str, content_type: Optional[str] = None) -> str:
        if self.fail:
            raise StorageError(f"Failed to store {suggested_key}", original_error="bucket unavailable")
        self.objects[suggested_key] = (data, content_type)
        return f"https://storage.example.com/{suggested_key}"


@dataclass
class FakeAIClient(AIClient):
    reply: str = "AI reply"
    title: str = "Generated Title"
    fail: bool = False
    text_calls: list[tuple[str, list[ChatTurn]]] = field(default_factory=list)
    vision_calls: list[tuple[str, bytes, str, list[ChatTurn]]] = field(default_factory=list)

    async def generate_text(self, prompt: str, history: Optional[list[ChatTurn]] = None) -> str:
        if self.fail:
            raise AIServiceError("Text generation failed")
        self.text_calls.append((prompt, list(history or [])))
        return self.reply

    async def generate_vision(
        self,
        prompt: str,
        image: bytes,
        mime_type: str = "image/jpeg",
        history: Optional[list[ChatTurn]] = None,
    ) -> str:
        if self.fail:
            raise AIServiceError("Image analysis failed")
        self.vision_calls.append((prompt, image, mime_type, list(history or [])))
        return self.reply

    async def generate_title(self, seed_message: str) -> str:
        return self.title


class FakePaymentGateway(PaymentGateway):
    def __init__(self, fail_orders: bool = False, fail_cancel: bool = False):
        self.orders: list[PaymentOrder] = []
        self.cancelled: list[str] = []
        self.fail_orders = fail_orders
        self.fail_cancel = fail_cancel

    @property
    def key_id(self) -> str:
        return "rzp_test_key"

    async def create_order(self, amount_minor: int, receipt: str, notes=None) -> PaymentOrder:
        if self.fail_orders:
            raise PaymentProviderError("Payment provider unreachable")
        order = PaymentOrder(
            id=f"order_{len(self.orders) + 1}",
            amount=amount_minor,
            currency="INR",
            receipt=receipt,
            notes=notes or {},
        )
        self.orders.append(order)
        return order

    async def cancel_subscription(self, subscription_id: str) -> None:
        if self.fail_cancel:
            raise PaymentProviderError("Payment provider rejected the request", status_code=400)
        self.cancelled.append(subscription_id)
