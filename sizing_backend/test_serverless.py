"""
Serverless handler tests: each handler is served from a real HTTPServer.
"""

import json
import threading
from http.server import HTTPServer

import httpx
import pytest

from api.calculate.pump import handler as pump_handler
from api.index import handler as health_handler

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


def serve(handler_cls):
    server = HTTPServer(("127.0.0.1", 0), handler_cls)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server


@pytest.fixture
def pump_url():
    server = serve(pump_handler)
    yield f"http://127.0.0.1:{server.server_address[1]}/api/calculate/pump"
    server.shutdown()
    server.server_close()


@pytest.fixture
def health_url():
    server = serve(health_handler)
    yield f"http://127.0.0.1:{server.server_address[1]}/api"
    server.shutdown()
    server.server_close()


def test_pump_post(pump_url):
    response = httpx.post(pump_url, content=json.dumps(DUTY))

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    body = response.json()
    assert body["nstatus"] == "Ns2"
    assert body["performanceData"]["flowPoints"] == [0, 125, 250, 375, 500, 650]


def test_pump_validation_error(pump_url):
    response = httpx.post(pump_url, content=json.dumps({**DUTY, "q": None}))

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid or missing number for 'q'"}


def test_pump_invalid_json(pump_url):
    response = httpx.post(pump_url, content=b"{not json")

    assert response.status_code == 400
    assert response.json() == {"error": "Request body is not valid JSON"}


def test_pump_empty_body_names_first_field(pump_url):
    response = httpx.post(pump_url, content=b"")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid or missing number for 'n'"}


def test_pump_options(pump_url):
    response = httpx.options(pump_url)

    assert response.status_code == 200
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert response.content == b""


def test_pump_get_not_allowed(pump_url):
    response = httpx.get(pump_url)

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


def test_health_get(health_url):
    response = httpx.get(health_url)

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_pump_zero_efficiency_alternate_is_valid_json(pump_url):
    response = httpx.post(pump_url, content=json.dumps({**DUTY, "n": 100, "q": 1, "tdhm": 1000}))

    assert response.status_code == 200
    # strict parse: no NaN/Infinity tokens in the body
    body = json.loads(response.text, parse_constant=pytest.fail)
    assert body["newPumpPerformance"]["hydpower"] is None
