"""Decimal money utilities.

Amounts are Decimal with two fractional digits, stored as NUMERIC(14,2).
No float arithmetic: JSON floats only appear at the response boundary.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("999999999999.99")  # NUMERIC(14,2) upper bound


def parse_amount(raw: object) -> Decimal:
    """Coerce a JSON number or numeric string into a positive amount.

    Rounds half-up to cents. Raises ValueError when the value is not numeric,
    not finite, too large, or not > 0 after rounding.
    """
    if isinstance(raw, bool) or raw is None:
        raise ValueError(f"Amount must be numeric, got {raw!r}")
    try:
        # str() first: Decimal(0.1) would carry the float's binary expansion
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        raise ValueError(f"Amount must be numeric, got {raw!r}") from None
    if not value.is_finite():
        raise ValueError(f"Amount must be finite, got {raw!r}")
    if value > MAX_AMOUNT:
        raise ValueError(f"Amount exceeds {MAX_AMOUNT}, got {raw!r}")
    value = value.quantize(CENT, rounding=ROUND_HALF_UP)
    if value <= 0:
        raise ValueError(f"Amount must be greater than 0, got {raw!r}")
    return value


def to_display(amount: Decimal) -> str:
    """Format for logs: Decimal('1234.5') -> '1,234.50'."""
    return f"{amount.quantize(CENT, rounding=ROUND_HALF_UP):,}"
