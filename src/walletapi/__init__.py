"""WalletAPI application factory."""

from __future__ import annotations

import time
from importlib import import_module
from typing import Iterable

from flask import Flask, g, request
from flask_cors import CORS

from .config import BaseConfig, DevConfig, TestConfig
from .logging_config import get_logger, setup_logging

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths in registration order."""

    yield "walletapi.blueprints.health"
    yield "walletapi.blueprints.users"
    yield "walletapi.blueprints.transactions"


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_cls = _resolve_config(config_name)
    config_obj = config_cls()
    app.config.from_object(config_obj)
    app.config["WALLETAPI_CONFIG"] = config_obj
    # Keep response keys in insertion order.
    app.json.sort_keys = False

    setup_logging(config_obj)

    CORS(app, resources={r"/*": {"origins": config_obj.CORS_ORIGINS}})

    _register_blueprints(app)

    from .blueprints.errors import register_error_handlers
    from .extensions import init_db

    register_error_handlers(app)
    init_db(app)
    _register_request_logging(app)

    from . import cli as _cli

    _cli.init_app(app)

    get_logger(__name__).info(
        "Application created",
        extra={
            "config": config_cls.__name__,
            "database": _redact(config_obj.DATABASE_URL),
            "cors_origins": config_obj.CORS_ORIGINS,
        },
    )
    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        blueprint = getattr(module, "bp")
        app.register_blueprint(blueprint)


def _register_request_logging(app: Flask) -> None:
    logger = get_logger("http")

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop("request_started", None)
        duration_ms = (time.perf_counter() - started) * 1000 if started else None
        logger.info(
            "%s %s -> %s",
            request.method,
            request.path,
            response.status_code,
            extra={"duration_ms": round(duration_ms, 2) if duration_ms is not None else None},
        )
        return response


def _redact(url: str) -> str:
    """Hide credentials in a database URL before logging it."""

    scheme, sep, rest = url.partition("://")
    if "@" not in rest:
        return url
    return f"{scheme}{sep}***@{rest.split('@', 1)[1]}"


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
