"""Domain models for ft_transaction — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from src.ft_common.enums import TransactionType


@dataclass(frozen=True)
class TransactionDraft:
    """A validated create request, not yet persisted."""
    user_id: str
    amount: Decimal          # > 0, two decimals
    description: str         # trimmed, non-empty
    category: str
    type: TransactionType
    date: date
    time: str                # free text, "HH:MM" when defaulted


@dataclass(frozen=True)
class Transaction:
    id: str
    user_id: str
    amount: Decimal
    description: str
    category: str
    type: TransactionType
    date: date
    time: str | None
    created_at: datetime


@dataclass
class MonthlyBucket:
    month: str               # "Mar 2024"
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
