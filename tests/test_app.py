from __future__ import annotations

import pytest

from src.classroll.classroll.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("DATABASE_PATH", ":memory:")
    monkeypatch.setenv("AUTO_SEED_DB", "0")
    app = create_app()
    yield app.test_client()
    app.extensions["classroll.container"].conn.close()


def test_api_invokes_bridge_operations(client):
    created = client.post("/api/sections.create", json={"name": "BSIT-1A", "schedule": "MWF"})
    assert created.status_code == 200
    assert created.get_json()["success"] is True

    listed = client.post("/api/sections.list").get_json()
    assert [s["name"] for s in listed["data"]] == ["BSIT-1A"]


def test_api_domain_failure_is_an_envelope(client):
    resp = client.post("/api/auth.login", json={"email": "ghost@school.test", "password": "x"})

    assert resp.status_code == 200
    assert resp.get_json() == {"success": False, "error": "User not found", "code": "NotFound"}


def test_api_unknown_operation_is_404(client):
    resp = client.post("/api/nope.nothing", json={})

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Invalid channel"


def test_api_lists_operations(client):
    ops = client.get("/api/operations").get_json()["data"]

    assert "dashboard.getStats" in ops
    assert "attendance.mark" in ops
