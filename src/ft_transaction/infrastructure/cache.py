"""RedisTransactionCache — concrete implementation of TransactionCacheProtocol.

Thin adapter: every redis-py failure is re-raised as CacheError so the
application layer can degrade to the store without knowing about Redis.
"""

from collections.abc import Awaitable, Callable

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from src.ft_common.errors import CacheError
from src.ft_common.redis_client import get_redis


class RedisTransactionCache:
    def __init__(
        self,
        client_factory: Callable[[], Awaitable[aioredis.Redis]] = get_redis,
    ) -> None:
        self._client_factory = client_factory

    async def get(self, key: str) -> str | None:
        try:
            client = await self._client_factory()
            return await client.get(key)
        except RedisError as exc:
            raise CacheError(f"GET {key} failed: {exc}") from exc

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            client = await self._client_factory()
            await client.set(key, value, ex=ttl_seconds)
        except RedisError as exc:
            raise CacheError(f"SET {key} failed: {exc}") from exc

    async def delete(self, *keys: str) -> None:
        if not keys:
            return
        try:
            client = await self._client_factory()
            await client.delete(*keys)
        except RedisError as exc:
            raise CacheError(f"DEL {' '.join(keys)} failed: {exc}") from exc
