"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from clipgrad.config import APP_VERSION, Settings
from clipgrad.main import app
from tests.conftest import RECT_CLIP, SQUARE_CLIP


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"]


def test_offset_square():
    response = client.post("/api/offset", json={"clip": SQUARE_CLIP, "radius": 1})
    assert response.status_code == 200
    data = response.json()
    assert data["clip"] == "1,m -1 -1 l 11 -1 11 11 -1 11"
    assert data["winding"] == 1
    assert data["vertex_count"] == 4
    assert data["error"] == ""


def test_offset_unusable_shape():
    response = client.post("/api/offset", json={"clip": "garbage", "radius": 1})
    assert response.status_code == 200
    data = response.json()
    assert data["clip"] == ""
    assert data["error"]


def test_gradient_rectangle():
    response = client.post("/api/gradient", json={
        "clip": RECT_CLIP,
        "thickness": 20,
        "position": "outside",
        "step": 10,
        "colors": [{"channel": 1, "start": "#FF0000", "end": "#0000FF"}],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["error"] == ""
    assert data["band_count"] == 3
    assert data["bands"][0]["clip"] == "1,m 0 0 l 100 0 100 50 0 50"
    assert data["bands"][0]["colors"] == [{"channel": 1, "hex": "#FF0000", "ass": "&H0000FF&"}]
    assert data["bands"][1]["colors"][0]["hex"] == "#AA0055"
    assert data["cap"]["tag"] == "iclip"
    assert data["cap"]["colors"][0]["hex"] == "#0000FF"


def test_gradient_uses_defaults():
    response = client.post("/api/gradient", json={"clip": SQUARE_CLIP})
    assert response.status_code == 200
    data = response.json()
    # Default 20px thickness in 1px steps
    assert data["band_count"] == 21
    assert data["bands"][0]["colors"] == []


def test_gradient_accepts_ass_colors():
    response = client.post("/api/gradient", json={
        "clip": SQUARE_CLIP,
        "thickness": 2,
        "colors": [{"channel": 3, "start": "&H0000FF&", "end": "&HFF0000&"}],
    })
    data = response.json()
    assert data["bands"][0]["colors"][0] == {"channel": 3, "hex": "#FF0000", "ass": "&H0000FF&"}


def test_gradient_unusable_shape():
    response = client.post("/api/gradient", json={"clip": "m 0 0"})
    assert response.status_code == 200
    data = response.json()
    assert data["bands"] == []
    assert data["error"]


def test_gradient_rejects_bad_color():
    response = client.post("/api/gradient", json={
        "clip": SQUARE_CLIP,
        "colors": [{"channel": 1, "start": "red", "end": "#0000FF"}],
    })
    assert response.status_code == 422


def test_gradient_rejects_bad_thickness():
    response = client.post("/api/gradient", json={"clip": SQUARE_CLIP, "thickness": 0.3})
    assert response.status_code == 422


def test_gradient_batch_isolates_failures():
    response = client.post("/api/gradient/batch", json={
        "thickness": 4,
        "step": 2,
        "lines": [
            {"clip": RECT_CLIP},
            {"clip": "nothing here"},
            {"clip": SQUARE_CLIP, "inverse": True},
        ],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["lines_completed"] == 2
    assert data["lines_failed"] == 1
    assert set(data["errors"]) == {"1"}
    assert data["results"][0]["band_count"] == 3
    assert data["results"][1]["bands"] == []
    assert data["results"][2]["bands"][0]["inverse"] is True


def test_gradient_rejects_duplicate_channels():
    response = client.post("/api/gradient", json={
        "clip": SQUARE_CLIP,
        "colors": [
            {"channel": 1, "start": "#FF0000", "end": "#0000FF"},
            {"channel": 1, "start": "#00FF00", "end": "#0000FF"},
        ],
    })
    assert response.status_code == 422


def test_settings_reject_unknown_position():
    with pytest.raises(ValidationError):
        Settings(default_position="sideways")


def test_health_reports_app_version():
    assert client.get("/api/health").json()["version"] == APP_VERSION
