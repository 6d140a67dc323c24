"""Tests for fetching and mapping transaction rows."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from walletapi.domain.errors import RowMappingError, StorageError
from walletapi.domain.filters import FilterSet
from walletapi.domain.vocabulary import TransactionCategory, TransactionType
from walletapi.services.transactions import fetch_transactions, map_transaction_row


def test_map_row_builds_typed_record(row_factory):
    row = row_factory(description="weekly shop")
    record = map_transaction_row(row)

    assert record.id == row["id"]
    assert record.kind is TransactionType.EXPENSE
    assert record.category is TransactionCategory.GROCERIES
    assert record.amount == Decimal("-20")
    assert record.description == "weekly shop"


def test_map_row_treats_naive_timestamps_as_utc(row_factory):
    record = map_transaction_row(row_factory(created_at=datetime(2024, 5, 1, 8, 30)))
    assert record.created_at == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)


def test_map_row_null_description_becomes_empty(row_factory):
    assert map_transaction_row(row_factory(description=None)).description == ""


def test_map_row_unknown_category(row_factory):
    with pytest.raises(RowMappingError) as excinfo:
        map_transaction_row(row_factory(category="Snacks"))
    assert excinfo.value.field == "category"
    assert excinfo.value.raw_value == "Snacks"


def test_map_row_unknown_type(row_factory):
    with pytest.raises(RowMappingError) as excinfo:
        map_transaction_row(row_factory(transaction_type="Transfer"))
    assert excinfo.value.field == "transaction_type"


def test_map_row_missing_column(row_factory):
    row = row_factory()
    del row["amount"]
    with pytest.raises(RowMappingError) as excinfo:
        map_transaction_row(row)
    assert excinfo.value.field == "amount"


@pytest.mark.parametrize("bad_amount", [1.5, "12.00", True, None])
def test_map_row_rejects_inexact_amount(row_factory, bad_amount):
    with pytest.raises(RowMappingError):
        map_transaction_row(row_factory(amount=bad_amount))


def test_map_row_rejects_string_id(row_factory):
    with pytest.raises(RowMappingError) as excinfo:
        map_transaction_row(row_factory(id="not-a-uuid"))
    assert excinfo.value.field == "id"


def test_fetch_issues_one_query(fake_storage, row_factory):
    user = uuid4()
    storage = fake_storage(rows=[row_factory(user_id=user), row_factory(user_id=user)])

    records = fetch_transactions(
        storage, FilterSet(user_id=user, category=TransactionCategory.GROCERIES)
    )

    assert len(records) == 2
    assert len(storage.queries) == 1
    query = storage.queries[0]
    assert query.sql.endswith(" WHERE user_id = :user_id AND category = :category")
    assert query.values == (user, "Groceries")


def test_fetch_preserves_storage_order(fake_storage, row_factory):
    rows = [row_factory(description=str(idx)) for idx in range(5)]
    records = fetch_transactions(fake_storage(rows=rows), FilterSet())
    assert [record.description for record in records] == ["0", "1", "2", "3", "4"]


def test_fetch_empty_result(fake_storage):
    assert fetch_transactions(fake_storage(), FilterSet()) == []


def test_fetch_fails_whole_call_on_bad_row(fake_storage, row_factory):
    rows = [row_factory(), row_factory(category="Snacks"), row_factory()]
    with pytest.raises(RowMappingError):
        fetch_transactions(fake_storage(rows=rows), FilterSet())


def test_fetch_propagates_storage_error(fake_storage):
    storage = fake_storage(error=StorageError("connection refused"))
    with pytest.raises(StorageError):
        fetch_transactions(storage, FilterSet())
