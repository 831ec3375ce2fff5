"""Unit-test doubles: an in-memory transaction cache and domain factories."""

from datetime import UTC, date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.ft_common.enums import TransactionType
from src.ft_common.errors import CacheError
from src.ft_transaction.domain.models import Transaction


class FakeTransactionCache:
    """Dict-backed TransactionCacheProtocol with switchable failures."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.fail_get = False
        self.fail_set = False
        self.fail_delete = False
        # Simulates a redis-py client with decode_responses=True reading non-UTF-8 bytes
        self.fail_decode = False
        self.get_calls = 0

    async def get(self, key: str) -> str | None:
        self.get_calls += 1
        if self.fail_get:
            raise CacheError("GET failed")
        if self.fail_decode:
            raise UnicodeDecodeError("utf-8", b"\xff\xfe[]", 0, 1, "invalid start byte")
        return self.store.get(key)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        if self.fail_set:
            raise CacheError("SET failed")
        self.store[key] = value
        self.ttls[key] = ttl_seconds

    async def delete(self, *keys: str) -> None:
        if self.fail_delete:
            raise CacheError("DEL failed")
        for key in keys:
            self.store.pop(key, None)
            self.ttls.pop(key, None)


def make_transaction(**kwargs) -> Transaction:
    defaults = dict(
        id="7f1c2a9e-0000-4000-8000-000000000001",
        user_id="u1",
        amount=Decimal("50.50"),
        description="Lunch",
        category="Food & Dining",
        type=TransactionType.EXPENSE,
        date=date(2024, 3, 1),
        time="12:30",
        created_at=datetime(2024, 3, 1, 12, 31, tzinfo=UTC),
    )
    defaults.update(kwargs)
    return Transaction(**defaults)


@pytest.fixture
def fake_cache() -> FakeTransactionCache:
    return FakeTransactionCache()


@pytest.fixture
def db() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def make_txn():
    """Factory fixture: make_txn(amount=Decimal("1"), ...) -> Transaction."""
    return make_transaction
