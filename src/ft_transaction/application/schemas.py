"""Pydantic schemas for the ft_transaction API.

JSON keys are camelCase (userId, createdAt); Python attributes are snake_case.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel

from src.ft_common.datetime_utils import current_time_hhmm, parse_business_date
from src.ft_common.enums import TransactionType
from src.ft_common.errors import (
    InvalidAmountError,
    InvalidDateError,
    InvalidTypeError,
    MissingFieldError,
)
from src.ft_common.money import parse_amount
from src.ft_transaction.domain.constants import SUGGESTED_CATEGORIES
from src.ft_transaction.domain.models import MonthlyBucket, Transaction, TransactionDraft


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CreateTransactionRequest(_CamelModel):
    """Loose wire shape: every field optional, amount may be a string or number.

    to_draft() is the only way in: it validates in a fixed order and raises
    one ValidationError subclass per failure cause.
    """

    user_id: str | None = None
    amount: Any = None
    description: str | None = None
    category: str | None = None
    type: Any = None
    date: str | None = None
    time: str | None = None

    def to_draft(self) -> TransactionDraft:
        for field in ("user_id", "amount", "description", "category", "type", "date"):
            if _is_blank(getattr(self, field)):
                raise MissingFieldError(to_camel(field))

        try:
            amount = parse_amount(self.amount)
        except ValueError:
            raise InvalidAmountError() from None

        try:
            txn_type = TransactionType(self.type)
        except ValueError:
            raise InvalidTypeError(str(self.type)) from None

        try:
            business_date = parse_business_date(self.date)
        except ValueError:
            raise InvalidDateError(str(self.date)) from None

        time = self.time.strip() if self.time and self.time.strip() else current_time_hhmm()
        return TransactionDraft(
            user_id=self.user_id,
            amount=amount,
            description=self.description.strip(),
            category=self.category,
            type=txn_type,
            date=business_date,
            time=time,
        )


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class TransactionResponse(_CamelModel):
    id: str
    user_id: str
    amount: float
    description: str
    category: str
    type: TransactionType
    date: date
    time: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, txn: Transaction) -> "TransactionResponse":
        return cls(
            id=txn.id,
            user_id=txn.user_id,
            amount=float(txn.amount),
            description=txn.description,
            category=txn.category,
            type=txn.type,
            date=txn.date,
            time=txn.time,
            created_at=txn.created_at,
        )


class MonthlyBucketResponse(_CamelModel):
    month: str
    income: float
    expense: float

    @classmethod
    def from_domain(cls, bucket: MonthlyBucket) -> "MonthlyBucketResponse":
        return cls(
            month=bucket.month,
            income=float(bucket.income),
            expense=float(bucket.expense),
        )


class CategoriesResponse(_CamelModel):
    income: list[str]
    expense: list[str]

    @classmethod
    def suggested(cls) -> "CategoriesResponse":
        return cls(
            income=list(SUGGESTED_CATEGORIES[TransactionType.INCOME]),
            expense=list(SUGGESTED_CATEGORIES[TransactionType.EXPENSE]),
        )


# Cache payload codecs: list[...] snapshots stored as JSON strings
RECENT_TRANSACTIONS_ADAPTER: TypeAdapter[list[TransactionResponse]] = TypeAdapter(
    list[TransactionResponse]
)
MONTHLY_SUMMARY_ADAPTER: TypeAdapter[list[MonthlyBucketResponse]] = TypeAdapter(
    list[MonthlyBucketResponse]
)
