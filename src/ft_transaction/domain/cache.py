"""Transaction read cache — key scheme, read outcome and cache Protocol.

  - Recent list key:    f"{prefix}:recent:{user_id}"
  - Monthly summary key: f"{prefix}:monthly:{user_id}:{filter}"
  - Write path: DB commit first, then invalidate every key of the user
  - Read path: cache-aside (check cache → DB on miss/corrupt → populate cache)

The cache is an accelerator only. Values are JSON snapshots that can always
be rebuilt from the transactions table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Protocol, TypeVar

from src.ft_common.enums import TimeFilter

T = TypeVar("T")


class CacheStatus(str, Enum):
    HIT = "HIT"
    MISS = "MISS"
    CORRUPT = "CORRUPT"          # present but not valid JSON of the expected shape
    UNAVAILABLE = "UNAVAILABLE"  # cache backend raised


@dataclass(frozen=True)
class CacheRead(Generic[T]):
    status: CacheStatus
    value: T | None = None

    @property
    def is_hit(self) -> bool:
        return self.status is CacheStatus.HIT


class TransactionCacheKeys:
    def __init__(self, prefix: str) -> None:
        self._prefix = prefix

    def recent(self, user_id: str) -> str:
        return f"{self._prefix}:recent:{user_id}"

    def monthly(self, user_id: str, time_filter: TimeFilter) -> str:
        return f"{self._prefix}:monthly:{user_id}:{time_filter.value}"

    def all_for_user(self, user_id: str) -> list[str]:
        """Every key a new transaction of user_id can make stale."""
        return [self.recent(user_id)] + [
            self.monthly(user_id, f) for f in TimeFilter
        ]


class TransactionCacheProtocol(Protocol):
    """Raw string cache. Implementations raise CacheError on backend failure."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl_seconds: int) -> None: ...

    async def delete(self, *keys: str) -> None: ...
