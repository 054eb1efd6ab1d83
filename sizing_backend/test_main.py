"""
FastAPI application tests.
"""

import json

import pytest
from fastapi.testclient import TestClient

from main import app
from sizing.config import get_settings

DUTY = {
    "n": 3000,
    "q": 500,
    "tdhm": 120,
    "npsha": 6,
    "suctype": 1,
    "sg": 1.0,
    "num_impellers": 1,
    "viscosity": 1,
}


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    for path in ("/", "/health"):
        response = client.get(path)
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == get_settings().api_version
        assert body["functions"]["pump"] == "available"
        assert "timestamp" in body


def test_pump_sizing(client):
    response = client.post("/calculate/pump", json=DUTY)

    assert response.status_code == 200
    body = response.json()
    assert body["headstage"] == 120.0
    assert body["nstatus"] == "Ns2"
    assert body["statusText"] == "Low Ns"
    assert body["newPumpPerformance"] is None
    assert body["warnings"] == [
        {"text": "Suction specific speed (Nss) is too high", "critical": True},
    ]

    curve = body["performanceData"]
    assert curve["flowPoints"] == [0, 125, 250, 375, 500, 650]
    assert curve["flowPercentages"] == [0, 25, 50, 75, 100, 130]
    for key in ("headPoints", "efficiencyPoints", "npshPoints", "powerPoints"):
        assert len(curve[key]) == 6


def test_alternate_pump_in_response(client):
    response = client.post("/calculate/pump", json={**DUTY, "n": 1450, "q": 30, "tdhm": 80})

    assert response.status_code == 200
    alt = response.json()["newPumpPerformance"]
    assert alt is not None
    assert set(alt) == {"flow", "head", "ns", "impdia", "npsh", "speed", "efficiency", "hydpower"}


def test_missing_field_is_rejected(client):
    payload = dict(DUTY)
    del payload["viscosity"]

    response = client.post("/calculate/pump", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid or missing number for 'viscosity'"}


def test_string_field_is_rejected(client):
    response = client.post("/calculate/pump", json={**DUTY, "tdhm": "120"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid or missing number for 'tdhm'"}


def test_nan_field_is_rejected(client):
    body = json.dumps({**DUTY, "npsha": float("nan")})

    response = client.post("/calculate/pump", content=body,
                           headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert "'npsha'" in response.json()["error"]


def test_bad_suction_type(client):
    response = client.post("/calculate/pump", json={**DUTY, "suctype": 3})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid value for 'suctype'; expected 1 or 2"}


def test_get_is_not_allowed(client):
    response = client.get("/calculate/pump")

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


def test_cors_preflight(client):
    response = client.options(
        "/calculate/pump",
        headers={
            "Origin": "https://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_zero_efficiency_alternate_is_null(client):
    response = client.post("/calculate/pump", json={**DUTY, "n": 100, "q": 1, "tdhm": 1000})

    assert response.status_code == 200
    body = response.json()
    assert body["efficiency"] < 0
    assert body["newPumpPerformance"]["efficiency"] == 0.0
    assert body["newPumpPerformance"]["hydpower"] is None


def test_unknown_route(client):
    response = client.get("/calculate/turbine")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
