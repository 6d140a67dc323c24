"""Tests for the health endpoints."""

from __future__ import annotations

from walletapi.blueprints.health import routes as health_routes
from walletapi.domain.errors import StorageError


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "message": "Wallet API is running"}


def test_db_health(client):
    response = client.get("/health/db")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "database": "connected"}


def test_db_health_reports_unavailable(client, monkeypatch):
    def _refuse(engine):
        raise StorageError("health check failed: OperationalError")

    monkeypatch.setattr(health_routes, "health_check", _refuse)
    response = client.get("/health/db")
    assert response.status_code == 503
    assert response.get_json() == {"status": "error", "database": "unavailable"}


def test_health_check_translates_driver_errors(tmp_path):
    import pytest
    from sqlmodel import create_engine

    from walletapi.infra.database import health_check

    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'nowhere.db'}")
    with pytest.raises(StorageError):
        health_check(engine)


def test_unknown_route_is_json_404(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.get_json()["error"] == "not_found"
