"""Compose the parameterized SELECT used by transaction listings and totals.

The builder never interpolates filter values into SQL text. Each predicate
contributes a fixed fragment with a named placeholder (``:user_id``) and a
``BoundParam`` carrying the value; the storage layer binds the values through
the database driver. Clause order follows ``_PREDICATES`` so the generated SQL
is stable for a given filter set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from ..domain.filters import FilterSet

TRANSACTION_COLUMNS: tuple[str, ...] = (
    "id",
    "user_id",
    "transaction_type",
    "amount",
    "category",
    "description",
    "created_at",
    "updated_at",
)

BASE_QUERY = f"SELECT {', '.join(TRANSACTION_COLUMNS)} FROM transactions"


@dataclass(frozen=True, slots=True)
class BoundParam:
    """A value bound to the named placeholder ``:name`` compared against ``column``."""

    name: str
    column: str
    value: Any


@dataclass(frozen=True, slots=True)
class TransactionQuery:
    """SQL text plus its bound parameters in placeholder order."""

    sql: str
    params: tuple[BoundParam, ...] = ()

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(param.value for param in self.params)

    def as_dict(self) -> dict[str, Any]:
        return {param.name: param.value for param in self.params}


@dataclass
class PredicateBuilder:
    """Accumulate ``column <op> :name`` predicates joined by WHERE/AND."""

    base: str
    _fragments: list[str] = field(default_factory=list, init=False)
    _params: list[BoundParam] = field(default_factory=list, init=False)
    _where_started: bool = field(default=False, init=False)

    def add(self, column: str, operator: str, value: Any, *, name: str | None = None) -> None:
        bind_name = name or column
        if any(param.name == bind_name for param in self._params):
            raise ValueError(f"Duplicate bind parameter: {bind_name}")
        keyword = "AND" if self._where_started else "WHERE"
        self._where_started = True
        self._fragments.append(f" {keyword} {column} {operator} :{bind_name}")
        self._params.append(BoundParam(name=bind_name, column=column, value=value))

    def build(self) -> TransactionQuery:
        return TransactionQuery(sql=self.base + "".join(self._fragments), params=tuple(self._params))


def _canonical(value: Any) -> str:
    return value.canonical()


def _utc(value: datetime) -> datetime:
    """Express ``value`` in UTC; naive values are taken to already be UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _same(value: Any) -> Any:
    return value


# (filter attribute, column, operator, bind name, value adapter)
_PREDICATES: tuple[tuple[str, str, str, str, Callable[[Any], Any]], ...] = (
    ("user_id", "user_id", "=", "user_id", _same),
    ("category", "category", "=", "category", _canonical),
    ("kind", "transaction_type", "=", "transaction_type", _canonical),
    ("amount_min", "amount", ">=", "amount_min", _same),
    ("amount_max", "amount", "<=", "amount_max", _same),
    ("start_time", "created_at", ">=", "start_time", _utc),
    ("end_time", "created_at", "<=", "end_time", _utc),
)


def build_transaction_query(filters: FilterSet) -> TransactionQuery:
    """Return the SELECT for ``filters``; an empty filter set selects every row."""

    builder = PredicateBuilder(BASE_QUERY)
    for attribute, column, operator, bind_name, adapt in _PREDICATES:
        value = getattr(filters, attribute)
        if value is None:
            continue
        builder.add(column, operator, adapt(value), name=bind_name)
    return builder.build()


__all__ = [
    "BASE_QUERY",
    "BoundParam",
    "PredicateBuilder",
    "TRANSACTION_COLUMNS",
    "TransactionQuery",
    "build_transaction_query",
]
