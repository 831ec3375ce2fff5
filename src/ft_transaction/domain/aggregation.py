"""Monthly income/expense aggregation.

Pure functions over domain models. The caller supplies transactions ordered
ascending by date; buckets come out in first-seen order, so the output is
chronological as well.
"""

from collections.abc import Iterable
from datetime import date

from src.ft_common.datetime_utils import start_of_month, start_of_week, start_of_year
from src.ft_common.enums import TimeFilter, TransactionType
from src.ft_transaction.domain.models import MonthlyBucket, Transaction

# Fixed English abbreviations: labels must not depend on the process locale
_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def month_label(day: date) -> str:
    """date(2024, 3, 17) -> 'Mar 2024'."""
    return f"{_MONTH_ABBR[day.month - 1]} {day.year}"


def window_start(time_filter: TimeFilter, today: date) -> date | None:
    """Inclusive lower bound of a named window. None for all-time."""
    if time_filter is TimeFilter.TODAY:
        return today
    if time_filter is TimeFilter.THIS_WEEK:
        return start_of_week(today)
    if time_filter is TimeFilter.THIS_MONTH:
        return start_of_month(today)
    if time_filter is TimeFilter.THIS_YEAR:
        return start_of_year(today)
    return None


def fold_monthly(transactions: Iterable[Transaction]) -> list[MonthlyBucket]:
    buckets: dict[str, MonthlyBucket] = {}
    for txn in transactions:
        label = month_label(txn.date)
        bucket = buckets.get(label)
        if bucket is None:
            bucket = buckets[label] = MonthlyBucket(month=label)
        if txn.type is TransactionType.INCOME:
            bucket.income += txn.amount
        else:
            bucket.expense += txn.amount
    return list(buckets.values())
