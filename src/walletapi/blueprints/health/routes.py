"""Liveness and database health endpoints."""

from __future__ import annotations

from flask import jsonify

from ...domain.errors import StorageError
from ...extensions import get_context
from ...infra.database import health_check
from ...logging_config import get_logger
from . import bp

logger = get_logger(__name__)


@bp.get("")
def health():
    """Return 200 while the process is serving requests."""

    return jsonify({"status": "ok", "message": "Wallet API is running"})


@bp.get("/db")
def db_health():
    """Return 200 when the database answers, 503 otherwise."""

    try:
        health_check(get_context().engine)
    except StorageError as exc:
        logger.warning("Database health check failed", extra={"error": str(exc)})
        return jsonify({"status": "error", "database": "unavailable"}), 503
    return jsonify({"status": "ok", "database": "connected"})
