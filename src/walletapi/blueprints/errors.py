"""Map domain errors onto JSON responses and status codes."""

from __future__ import annotations

from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from ..domain.errors import (
    InvalidEnumValue,
    MissingRequiredFilter,
    NotFound,
    RowMappingError,
    StorageError,
    WalletError,
)
from ..logging_config import get_logger

logger = get_logger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[WalletError], int], ...] = (
    (InvalidEnumValue, 400),
    (MissingRequiredFilter, 400),
    (NotFound, 404),
    (RowMappingError, 500),
    (StorageError, 500),
)


def status_for(error: WalletError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def validation_details(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by their top-level field."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


def register_error_handlers(app: Flask) -> None:
    """Install handlers translating the error taxonomy for every blueprint."""

    @app.errorhandler(WalletError)
    def _handle_wallet_error(exc: WalletError):
        status = status_for(exc)
        log = logger.error if status >= 500 else logger.warning
        log(str(exc), exc_info=status >= 500, extra={"error_code": exc.code, "status": status})
        return jsonify(exc.to_dict()), status

    @app.errorhandler(ValidationError)
    def _handle_validation_error(exc: ValidationError):
        details = validation_details(exc)
        logger.warning("Request validation failed", extra={"fields": sorted(details)})
        return (
            jsonify({"error": "invalid_request", "message": "Invalid request", "fields": details}),
            400,
        )

    @app.errorhandler(HTTPException)
    def _handle_http_error(exc: HTTPException):
        return (
            jsonify({"error": (exc.name or "error").lower().replace(" ", "_"), "message": exc.description}),
            exc.code or 500,
        )
