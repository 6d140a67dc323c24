"""Typed failures raised by the query, aggregation and registration flows."""

from __future__ import annotations

from typing import Any


class WalletError(Exception):
    """Base class for every error the wallet core raises."""

    code = "wallet_error"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": str(self)}


class InvalidEnumValue(WalletError):
    """A category/type label outside the closed vocabulary."""

    code = "invalid_enum_value"

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(field=self.field, value=self.value if isinstance(self.value, str) else repr(self.value))
        return payload


class MissingRequiredFilter(WalletError):
    """An operation was requested without a mandatory filter."""

    code = "missing_required_filter"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Filter {field!r} is required")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["field"] = self.field
        return payload


class RowMappingError(WalletError):
    """Storage returned a row that cannot be rebuilt into a typed record."""

    code = "row_mapping_error"

    def __init__(self, field: str, raw_value: Any, reason: str | None = None) -> None:
        self.field = field
        self.raw_value = raw_value
        detail = f"Could not map column {field!r} from value {raw_value!r}"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["field"] = self.field
        return payload


class StorageError(WalletError):
    """Connectivity or constraint failure reported by the storage layer."""

    code = "storage_error"


class NotFound(WalletError):
    """The requested entity has no matching row."""

    code = "not_found"

    def __init__(self, resource: str, key: Any) -> None:
        self.resource = resource
        self.key = key
        super().__init__(f"{resource} not found: {key}")


__all__ = [
    "InvalidEnumValue",
    "MissingRequiredFilter",
    "NotFound",
    "RowMappingError",
    "StorageError",
    "WalletError",
]
