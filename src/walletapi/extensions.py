"""Extension wiring that attaches the application context to Flask."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .context import AppContext, create_app_context

EXTENSION_KEY = "walletapi"


def init_db(app: Flask) -> AppContext:
    """Build the application context from the app's configuration and register it."""

    config: BaseConfig = app.config["WALLETAPI_CONFIG"]
    ctx = create_app_context(config)
    app.extensions[EXTENSION_KEY] = ctx
    return ctx


def get_context(app: Flask | None = None) -> AppContext:
    """Return the context registered on ``app`` (defaults to the current app)."""

    target = app or current_app
    try:
        return target.extensions[EXTENSION_KEY]
    except KeyError:  # pragma: no cover - exercised only on misconfigured apps
        raise RuntimeError("Database context not initialized; call init_db(app) first") from None
