"""Suggested category labels per transaction type.

Suggestions only: category is free text on create.
"""

from src.ft_common.enums import TransactionType

SUGGESTED_CATEGORIES: dict[TransactionType, tuple[str, ...]] = {
    TransactionType.EXPENSE: (
        "Food & Dining",
        "Transportation",
        "Housing",
        "Utilities",
        "Entertainment",
        "Healthcare",
        "Shopping",
        "Personal Care",
        "Education",
        "Travel",
        "Other",
    ),
    TransactionType.INCOME: (
        "Salary",
        "Freelance",
        "Investment",
        "Gift",
        "Refund",
        "Rental Income",
        "Business",
        "Other",
    ),
}
