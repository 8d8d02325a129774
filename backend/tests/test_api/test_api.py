"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from floorgeo.main import app
from tests.conftest import PLAN_LABELS, PLAN_WALKWAYS, PLAN_WALLS, entity_payload


client = TestClient(app)


def _plan_request() -> dict:
    return {
        "entities": [entity_payload(e) for e in PLAN_WALLS + PLAN_WALKWAYS],
        "unit_labels": [
            {"handle": label.handle, "text": label.text, "x": label.x, "y": label.y} for label in PLAN_LABELS
        ],
    }


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["transforms_registered"] == 7


def test_generate_plan():
    response = client.post("/api/generate", json=_plan_request())
    assert response.status_code == 200
    data = response.json()
    # default resolution: 2000 cells across the plan
    assert data["generated_unit_areas"] == 2
    assert data["failed_unit_areas"] == 1
    assert data["generated_background_contours"] == 1
    assert data["transforms_failed"] == 0
    assert data["transforms_completed"] == 7
    assert data["processing_time_ms"] > 0

    areas = {a["unit_number"]: a for a in data["unit_areas"]}
    assert set(areas) == {"101", "102"}
    assert 85.0 < areas["101"]["area"] < 100.0


def test_generate_routes():
    data = client.post("/api/generate", json=_plan_request()).json()
    routes = {r["unit_number"]: r for r in data["unit_routes"]}
    assert routes["101"]["node_ids"] == [201, 202, 203]
    assert routes["101"]["highlight_ids"] == [201, 202, 203, 301, 302]
    assert routes["101"]["distance"] == 15.0
    assert routes["101"]["enclosed"] is True
    assert routes["103"]["enclosed"] is False


def test_generate_hidden_layers():
    body = _plan_request()
    body["hidden_layers"] = ["Walls"]
    data = client.post("/api/generate", json=body).json()
    assert data["generated_unit_areas"] == 0
    assert data["failed_unit_areas"] == 3
    assert data["generated_background_contours"] == 0


def test_generate_empty():
    response = client.post("/api/generate", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["unit_areas"] == []
    assert data["errors"] == {}


def test_generate_rejects_unknown_shape_kind():
    body = {"entities": [{"handle": 1, "layer": "Walls", "shape": {"kind": "spline", "points": []}}]}
    assert client.post("/api/generate", json=body).status_code == 422


def test_generate_rejects_negative_radius():
    body = {"entities": [{"handle": 1, "layer": "Walls", "shape": {"kind": "circle", "center": [0, 0], "radius": -1}}]}
    assert client.post("/api/generate", json=body).status_code == 422


def test_generate_accepts_arcs():
    body = {
        "entities": [
            {"handle": 1, "layer": "Walls", "shape": {"kind": "arc", "center": [0, 0], "radius": 10, "start_angle": 0, "end_angle": 3.14159}},
            {"handle": 2, "layer": "Walls", "shape": {"kind": "segment", "start": [-10, 0], "end": [10, 0]}},
        ],
        "unit_labels": [{"handle": 3, "text": "A1", "x": 0, "y": 5}],
    }
    data = client.post("/api/generate", json=body).json()
    assert data["generated_unit_areas"] == 1


def test_route():
    body = {"entities": [entity_payload(e) for e in PLAN_WALKWAYS], "x": 14.0, "y": 0.0}
    response = client.post("/api/walkways/route", json=body)
    assert response.status_code == 200
    data = response.json()
    assert data["node_ids"] == [202, 203]
    assert data["highlight_ids"] == [202, 203, 302]
    assert data["path"] == [[15.0, -4.0], [20.0, -4.0]]
    assert data["distance"] == 5.0


def test_route_without_walkways():
    response = client.post("/api/walkways/route", json={"entities": [], "x": 0.0, "y": 0.0})
    assert response.status_code == 200
    data = response.json()
    assert data["node_ids"] == []
    assert data["distance"] is None
