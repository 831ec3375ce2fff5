"""Global enums — TransactionType must match the DB CHECK constraint exactly."""

from enum import Enum


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class TimeFilter(str, Enum):
    """Named windows for the monthly summary, relative to today."""
    TODAY = "today"
    THIS_WEEK = "this-week"
    THIS_MONTH = "this-month"
    THIS_YEAR = "this-year"
    ALL_TIME = "all-time"
