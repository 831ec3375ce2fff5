"""TransactionApplicationService — write path, recent list and monthly summary.

create_transaction commits, then invalidates the user's cache entries.
The two read paths are cache-aside over the repository and never commit.
The caller (router) passes the db session and the user identity explicitly.
"""

import logging
from collections.abc import Callable
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.ft_common.datetime_utils import local_now
from src.ft_common.enums import TimeFilter
from src.ft_common.errors import InvalidFilterError, MissingFieldError, StoreError
from src.ft_common.money import to_display
from src.ft_transaction.application.cache_aside import evict, read_cached, store_cached
from src.ft_transaction.application.schemas import (
    MONTHLY_SUMMARY_ADAPTER,
    RECENT_TRANSACTIONS_ADAPTER,
    CategoriesResponse,
    CreateTransactionRequest,
    MonthlyBucketResponse,
    TransactionResponse,
)
from src.ft_transaction.domain.aggregation import fold_monthly, window_start
from src.ft_transaction.domain.cache import TransactionCacheKeys, TransactionCacheProtocol
from src.ft_transaction.domain.repository import TransactionRepositoryProtocol
from src.ft_transaction.infrastructure.cache import RedisTransactionCache
from src.ft_transaction.infrastructure.persistence import TransactionRepository

logger = logging.getLogger(__name__)


def _require_user_id(user_id: str | None) -> str:
    if user_id is None or not user_id.strip():
        raise MissingFieldError("userId")
    return user_id


def _parse_filter(raw: str | None) -> TimeFilter:
    if not raw:
        return TimeFilter.ALL_TIME
    try:
        return TimeFilter(raw)
    except ValueError:
        raise InvalidFilterError(raw) from None


class TransactionApplicationService:
    def __init__(
        self,
        repo: TransactionRepositoryProtocol | None = None,
        cache: TransactionCacheProtocol | None = None,
        *,
        recent_limit: int = settings.RECENT_TRANSACTIONS_LIMIT,
        recent_ttl_seconds: int = settings.RECENT_TRANSACTIONS_CACHE_TTL_SECONDS,
        monthly_ttl_seconds: int = settings.MONTHLY_SUMMARY_CACHE_TTL_SECONDS,
        key_prefix: str = settings.CACHE_KEY_PREFIX,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._repo: TransactionRepositoryProtocol = repo or TransactionRepository()
        self._cache: TransactionCacheProtocol = cache or RedisTransactionCache()
        self._keys = TransactionCacheKeys(key_prefix)
        self._recent_limit = recent_limit
        self._recent_ttl = recent_ttl_seconds
        self._monthly_ttl = monthly_ttl_seconds
        self._today = today or (lambda: local_now().date())

    async def create_transaction(
        self, db: AsyncSession, body: CreateTransactionRequest
    ) -> TransactionResponse:
        # Validation raises before any side effect
        draft = body.to_draft()
        try:
            txn = await self._repo.create_transaction(db, draft)
            await db.commit()
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.exception("Transaction commit failed: user=%s", draft.user_id)
            raise StoreError() from exc
        except Exception:
            await db.rollback()
            raise

        logger.info(
            "Transaction created: id=%s user=%s type=%s amount=%s",
            txn.id, txn.user_id, txn.type.value, to_display(txn.amount),
        )
        await evict(self._cache, *self._keys.all_for_user(txn.user_id))
        return TransactionResponse.from_domain(txn)

    async def list_recent_transactions(
        self, db: AsyncSession, user_id: str | None
    ) -> list[TransactionResponse]:
        user_id = _require_user_id(user_id)
        key = self._keys.recent(user_id)

        cached = await read_cached(self._cache, key, RECENT_TRANSACTIONS_ADAPTER)
        if cached.is_hit:
            return cached.value

        transactions = await self._repo.list_recent(db, user_id, self._recent_limit)
        items = [TransactionResponse.from_domain(t) for t in transactions]
        await store_cached(
            self._cache, key, RECENT_TRANSACTIONS_ADAPTER, items, self._recent_ttl
        )
        return items

    async def monthly_summary(
        self, db: AsyncSession, user_id: str | None, time_filter: str | None
    ) -> list[MonthlyBucketResponse]:
        user_id = _require_user_id(user_id)
        window = _parse_filter(time_filter)
        key = self._keys.monthly(user_id, window)

        cached = await read_cached(self._cache, key, MONTHLY_SUMMARY_ADAPTER)
        if cached.is_hit:
            return cached.value

        since = window_start(window, self._today())
        transactions = await self._repo.list_since(db, user_id, since)
        buckets = [MonthlyBucketResponse.from_domain(b) for b in fold_monthly(transactions)]
        await store_cached(
            self._cache, key, MONTHLY_SUMMARY_ADAPTER, buckets, self._monthly_ttl
        )
        return buckets

    def suggested_categories(self) -> CategoriesResponse:
        return CategoriesResponse.suggested()
