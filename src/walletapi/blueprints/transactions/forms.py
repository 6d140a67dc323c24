"""Request models for transaction creation and filtered queries.

Category and type labels are accepted as raw strings here and converted with
the strict vocabulary parsers, so an unknown label surfaces as
``InvalidEnumValue`` rather than a generic validation failure.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...domain.filters import FilterSet
from ...domain.money import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS
from ...domain.vocabulary import TransactionCategory, TransactionType


def _exact_decimal(value: Any) -> Any:
    """Route floats through their shortest repr so 0.1 stays 0.1."""

    if isinstance(value, bool):
        raise ValueError("Amount must be a number.")
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class CreateTransactionRequest(BaseModel):
    """JSON body accepted by ``POST /api/transactions``."""

    model_config = ConfigDict(extra="ignore")

    user_email: str = Field(min_length=1, max_length=255)
    transaction_type: str
    amount: Decimal = Field(max_digits=AMOUNT_MAX_DIGITS, decimal_places=AMOUNT_DECIMAL_PLACES)
    category: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=4000)

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Any:
        return _exact_decimal(value)

    def kind(self) -> TransactionType:
        return TransactionType.parse(self.transaction_type)

    def parsed_category(self) -> Optional[TransactionCategory]:
        if self.category is None:
            return None
        return TransactionCategory.parse(self.category)


class TransactionQueryParams(BaseModel):
    """Query-string filters shared by the listing and total endpoints."""

    model_config = ConfigDict(extra="ignore")

    user_id: Optional[UUID] = None
    category: Optional[str] = None
    transaction_type: Optional[str] = None
    amount_min: Optional[Decimal] = Field(
        default=None, max_digits=AMOUNT_MAX_DIGITS, decimal_places=AMOUNT_DECIMAL_PLACES
    )
    amount_max: Optional[Decimal] = Field(
        default=None, max_digits=AMOUNT_MAX_DIGITS, decimal_places=AMOUNT_DECIMAL_PLACES
    )
    start_timestamp: Optional[datetime] = None
    end_timestamp: Optional[datetime] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_missing(cls, value: Any) -> Any:
        """Treat ``?category=`` the same as an omitted parameter."""

        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_filters(self) -> FilterSet:
        """Convert to a ``FilterSet``, parsing labels strictly."""

        return FilterSet(
            user_id=self.user_id,
            category=(
                TransactionCategory.parse(self.category) if self.category is not None else None
            ),
            kind=(
                TransactionType.parse(self.transaction_type)
                if self.transaction_type is not None
                else None
            ),
            amount_min=self.amount_min,
            amount_max=self.amount_max,
            start_time=self.start_timestamp,
            end_time=self.end_timestamp,
        )


__all__ = ["CreateTransactionRequest", "TransactionQueryParams"]
