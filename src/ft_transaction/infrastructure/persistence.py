"""TransactionRepository — concrete implementation of TransactionRepositoryProtocol.

ORM statements over TransactionORM; rows are mapped to frozen domain
dataclasses before leaving this module. Any SQLAlchemyError becomes StoreError.

Transaction ownership: the CALLER (application service) commits or rolls back.
"""

import logging
from datetime import date

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_common.enums import TransactionType
from src.ft_common.errors import StoreError
from src.ft_transaction.domain.models import Transaction, TransactionDraft
from src.ft_transaction.infrastructure.db_models import TransactionORM

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------

def _row_to_transaction(row: TransactionORM) -> Transaction:
    return Transaction(
        id=str(row.id),
        user_id=row.user_id,
        amount=row.amount,
        description=row.description,
        category=row.category,
        type=TransactionType(row.type),
        date=row.date,
        time=row.time,
        created_at=row.created_at,
    )


class TransactionRepository:
    async def create_transaction(
        self, db: AsyncSession, draft: TransactionDraft
    ) -> Transaction:
        stmt = (
            insert(TransactionORM)
            .values(
                user_id=draft.user_id,
                amount=draft.amount,
                description=draft.description,
                category=draft.category,
                type=draft.type.value,
                date=draft.date,
                time=draft.time,
            )
            .returning(TransactionORM)
        )
        try:
            result = await db.execute(stmt)
            row = result.scalar_one()
        except SQLAlchemyError as exc:
            logger.exception("Transaction insert failed: user=%s", draft.user_id)
            raise StoreError() from exc
        return _row_to_transaction(row)

    async def list_recent(
        self, db: AsyncSession, user_id: str, limit: int
    ) -> list[Transaction]:
        stmt = (
            select(TransactionORM)
            .where(TransactionORM.user_id == user_id)
            .order_by(TransactionORM.created_at.desc(), TransactionORM.id.desc())
            .limit(limit)
        )
        try:
            result = await db.execute(stmt)
            rows = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.exception("Recent transactions query failed: user=%s", user_id)
            raise StoreError() from exc
        return [_row_to_transaction(r) for r in rows]

    async def list_since(
        self, db: AsyncSession, user_id: str, since: date | None
    ) -> list[Transaction]:
        stmt = select(TransactionORM).where(TransactionORM.user_id == user_id)
        if since is not None:
            stmt = stmt.where(TransactionORM.date >= since)
        stmt = stmt.order_by(TransactionORM.date.asc(), TransactionORM.created_at.asc())
        try:
            result = await db.execute(stmt)
            rows = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.exception(
                "Transactions window query failed: user=%s since=%s", user_id, since
            )
            raise StoreError() from exc
        return [_row_to_transaction(r) for r in rows]
