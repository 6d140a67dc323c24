"""Sign normalization for monetary amounts."""

from __future__ import annotations

from decimal import Decimal

from .vocabulary import TransactionType

# Storage is NUMERIC(19, 4).
AMOUNT_MAX_DIGITS = 19
AMOUNT_DECIMAL_PLACES = 4


def normalize_amount(kind: TransactionType, raw_amount: Decimal | int) -> Decimal:
    """Return the signed amount to store for ``kind``.

    The sign of ``raw_amount`` is ignored: expenses are stored negative and
    income positive. Floats are refused so that binary rounding never reaches
    stored or aggregated values; convert them with ``Decimal(str(value))``.
    """

    if isinstance(raw_amount, float) or not isinstance(raw_amount, (Decimal, int)):
        raise TypeError(f"amount must be Decimal or int, not {type(raw_amount).__name__}")
    if isinstance(raw_amount, Decimal) and not raw_amount.is_finite():
        raise ValueError(f"amount must be finite, not {raw_amount}")
    magnitude = abs(Decimal(raw_amount))
    if TransactionType.parse(kind) is TransactionType.EXPENSE:
        return -magnitude
    return magnitude
