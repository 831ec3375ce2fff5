"""Cache-aside helpers shared by the read paths and the write path.

None of these raise on cache trouble: a failed or corrupt read comes back as
a non-HIT CacheRead, failed writes and deletes are logged and dropped.
"""

import logging
from typing import TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.ft_common.errors import CacheError
from src.ft_transaction.domain.cache import CacheRead, CacheStatus, TransactionCacheProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _drop_corrupt(cache: TransactionCacheProtocol, key: str) -> CacheRead:
    logger.warning("Corrupt cache entry, dropping: key=%s", key)
    await evict(cache, key)
    return CacheRead(CacheStatus.CORRUPT)


async def read_cached(
    cache: TransactionCacheProtocol, key: str, adapter: TypeAdapter[T]
) -> CacheRead[T]:
    try:
        raw = await cache.get(key)
    except CacheError as exc:
        logger.warning("Cache read failed, using store: key=%s (%s)", key, exc.message)
        return CacheRead(CacheStatus.UNAVAILABLE)
    except UnicodeDecodeError:
        # Client decodes replies as UTF-8; undecodable bytes are a corrupt entry
        return await _drop_corrupt(cache, key)

    if raw is None:
        logger.debug("Cache miss: key=%s", key)
        return CacheRead(CacheStatus.MISS)

    try:
        value = adapter.validate_json(raw)
    except PydanticValidationError:
        return await _drop_corrupt(cache, key)

    logger.debug("Cache hit: key=%s", key)
    return CacheRead(CacheStatus.HIT, value)


async def store_cached(
    cache: TransactionCacheProtocol,
    key: str,
    adapter: TypeAdapter[T],
    value: T,
    ttl_seconds: int,
) -> None:
    payload = adapter.dump_json(value, by_alias=True).decode()
    try:
        await cache.set(key, payload, ttl_seconds)
    except CacheError as exc:
        logger.warning("Cache write failed: key=%s (%s)", key, exc.message)


async def evict(cache: TransactionCacheProtocol, *keys: str) -> None:
    try:
        await cache.delete(*keys)
    except CacheError as exc:
        # Stale entries age out via TTL
        logger.warning("Cache invalidation failed: keys=%s (%s)", keys, exc.message)
