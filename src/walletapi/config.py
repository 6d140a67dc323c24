"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_first(*names: str, default: str | None = None) -> str | None:
    """Return the first non-empty environment value among ``names``."""

    for name in names:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return default


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "WalletAPI"
    DB_FILENAME = "walletapi.db"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("WALLETAPI_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("WALLETAPI_DEV_MODE", default=True)
        self.DATABASE_URL = _env_first(
            "WALLETAPI_DATABASE_URL", "DATABASE_URL", default=self._build_sqlite_url()
        )
        self.HOST = _env_first("WALLETAPI_HOST", "HOST", default="0.0.0.0")
        self.PORT = self._parse_port(_env_first("WALLETAPI_PORT", "PORT", default="3000"))
        self.LOG_LEVEL = (os.getenv("WALLETAPI_LOG_LEVEL") or "INFO").upper()
        self.DB_TIMEOUT = int(os.getenv("WALLETAPI_DB_TIMEOUT", "30"))
        self.CORS_ORIGINS = self._parse_origins(os.getenv("WALLETAPI_CORS_ORIGINS", "*"))
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("WALLETAPI_SECRET_KEY must be set in non-dev mode.")

    @staticmethod
    def _parse_origins(raw: str) -> list[str]:
        """Split a comma-separated origin list; an empty value allows any origin."""

        origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
        return origins or ["*"]

    @staticmethod
    def _parse_port(raw: str | None) -> int:
        try:
            port = int(raw or "")
        except ValueError as exc:
            raise ValueError(f"Invalid PORT value: {raw!r}") from exc
        if not 0 < port < 65536:
            raise ValueError(f"Invalid PORT value: {raw!r}")
        return port

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("WALLETAPI_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Read-only install locations fall back to a per-user directory.
            fallback_path = Path.home() / ".walletapi"
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside ``DATA_DIR``."""

        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    @property
    def is_sqlite(self) -> bool:
        return (self.DATABASE_URL or "").startswith("sqlite")

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.is_sqlite:
            return {
                "connect_args": {"check_same_thread": False, "timeout": self.DB_TIMEOUT},
            }
        return {
            "pool_pre_ping": True,
            "pool_timeout": self.DB_TIMEOUT,
            "connect_args": {"connect_timeout": self.DB_TIMEOUT},
        }


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite and CI."""

    TESTING = True
