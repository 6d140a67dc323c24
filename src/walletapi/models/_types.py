"""Column types shared by table models."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from sqlalchemy import BigInteger, Numeric
from sqlalchemy.types import TypeDecorator

from ..domain.money import AMOUNT_DECIMAL_PLACES as AMOUNT_SCALE
from ..domain.money import AMOUNT_MAX_DIGITS as AMOUNT_PRECISION

_QUANTUM = Decimal(1).scaleb(-AMOUNT_SCALE)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def to_ten_thousandths(value: Decimal | int) -> int:
    """Return ``value`` as an integer count of ``0.0001`` units.

    Raises:
        ValueError: ``value`` has more than four decimal places or does not
            fit a signed 64-bit integer.
    """

    amount = Decimal(value)
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: {amount}")
    try:
        quantized = amount.quantize(_QUANTUM)
    except InvalidOperation:
        raise ValueError(f"Amount out of storage range: {amount}") from None
    if quantized != amount:
        raise ValueError(f"Amount has more than {AMOUNT_SCALE} decimal places: {amount}")
    units = int(quantized.scaleb(AMOUNT_SCALE))
    if not _INT64_MIN <= units <= _INT64_MAX:
        raise ValueError(f"Amount out of storage range: {amount}")
    return units


def from_ten_thousandths(units: int) -> Decimal:
    return Decimal(units).scaleb(-AMOUNT_SCALE).quantize(_QUANTUM)


class ExactAmount(TypeDecorator):
    """``NUMERIC(19, 4)`` that stays exact on SQLite.

    SQLite has no decimal storage class and would round-trip amounts through
    binary floats, so there they are kept as integer ten-thousandths. Integer
    ordering matches decimal ordering, so range predicates keep working.
    """

    impl = Numeric
    cache_ok = True

    def __init__(self) -> None:
        super().__init__(precision=AMOUNT_PRECISION, scale=AMOUNT_SCALE, asdecimal=True)

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(BigInteger())
        return super().load_dialect_impl(dialect)

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return to_ten_thousandths(value)

    def process_result_value(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return from_ten_thousandths(int(value))


__all__ = [
    "AMOUNT_PRECISION",
    "AMOUNT_SCALE",
    "ExactAmount",
    "from_ten_thousandths",
    "to_ten_thousandths",
]
