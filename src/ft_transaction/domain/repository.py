"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from datetime import date
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_transaction.domain.models import Transaction, TransactionDraft


class TransactionRepositoryProtocol(Protocol):
    async def create_transaction(
        self, db: AsyncSession, draft: TransactionDraft
    ) -> Transaction: ...

    async def list_recent(
        self, db: AsyncSession, user_id: str, limit: int
    ) -> list[Transaction]:
        """Newest first by created_at."""
        ...

    async def list_since(
        self, db: AsyncSession, user_id: str, since: date | None
    ) -> list[Transaction]:
        """Oldest first by business date; since=None means no lower bound."""
        ...
