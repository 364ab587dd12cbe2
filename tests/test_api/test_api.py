"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from hullkit import __version__
from hullkit.config import Settings
from hullkit.dependencies import get_settings
from hullkit.main import app
from tests.conftest import DIAGONAL, GRID_3X3, SQUARE


client = TestClient(app)


def _payload(points, **extra):
    return {"points": [{"x": p.x, "y": p.y} for p in points], **extra}


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


def test_hull_square():
    response = client.post("/api/hull", json=_payload(SQUARE))
    assert response.status_code == 200
    data = response.json()
    assert [(p["x"], p["y"]) for p in data["hull"]] == [(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)]
    assert data["closed"] is True
    assert data["degenerate"] is None
    assert data["vertex_count"] == 4
    assert data["pivot"] == {"x": 0.0, "y": 0.0}
    assert data["area"] == 4.0
    assert data["perimeter"] == 8.0
    assert data["bbox"] == [0.0, 0.0, 2.0, 2.0]
    assert data["processing_time_ms"] >= 0


def test_hull_collinear_returns_input():
    response = client.post("/api/hull", json=_payload(DIAGONAL))
    assert response.status_code == 200
    data = response.json()
    assert [(p["x"], p["y"]) for p in data["hull"]] == [(p.x, p.y) for p in DIAGONAL]
    assert data["closed"] is False
    assert data["degenerate"] == "collinear"
    assert data["area"] == 0.0


def test_hull_collinear_policy_override():
    response = client.post("/api/hull", json=_payload(GRID_3X3, keep_collinear=False))
    assert response.status_code == 200
    assert response.json()["vertex_count"] == 4

    response = client.post("/api/hull", json=_payload(GRID_3X3))
    assert response.json()["vertex_count"] == 7


def test_empty_points_rejected():
    response = client.post("/api/hull", json={"points": []})
    assert response.status_code == 422
    assert "empty" in response.json()["detail"]


def test_empty_points_allowed():
    response = client.post("/api/hull", json={"points": [], "allow_empty": True})
    assert response.status_code == 200
    data = response.json()
    assert data["hull"] == []
    assert data["degenerate"] == "empty"
    assert data["pivot"] is None


def test_malformed_point_rejected():
    response = client.post("/api/hull", json={"points": [{"x": 1}]})
    assert response.status_code == 422


def test_too_many_points():
    app.dependency_overrides[get_settings] = lambda: Settings(max_points=3)
    try:
        response = client.post("/api/hull", json=_payload(SQUARE))
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 413


def test_settings_override_reaches_hull_policies():
    app.dependency_overrides[get_settings] = lambda: Settings(hull_allow_empty=True)
    try:
        response = client.post("/api/hull", json={"points": []})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json()["degenerate"] == "empty"


def test_settings_override_collinear_policy():
    app.dependency_overrides[get_settings] = lambda: Settings(hull_keep_collinear=False)
    try:
        response = client.post("/api/hull", json=_payload(GRID_3X3))
    finally:
        app.dependency_overrides.clear()
    assert response.json()["vertex_count"] == 4
