import re
from datetime import datetime

from reidentify.store import DocumentStore
from tests.conftest import make_app

DASHBOARD = "https://sonafaculty-dashboard.netlify.app"


def test_health(client):
    rv = client.get("/api/health")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["status"] == "OK"
    assert data["message"] == "ReIDentify Backend API is running"
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", data["timestamp"])
    datetime.strptime(data["timestamp"], "%Y-%m-%dT%H:%M:%S.%fZ")


class DeadStore(DocumentStore):
    @property
    def session(self):
        raise RuntimeError("store is down")


def test_health_does_not_need_the_store(tmp_path):
    app = make_app(tmp_path, store=DeadStore())

    rv = app.test_client().get("/api/health")
    assert rv.status_code == 200
    assert rv.get_json()["status"] == "OK"


def test_security_headers_present_on_responses(client):
    r = client.get("/api/health")
    assert r.headers.get("X-Content-Type-Options") == "nosniff"
    assert r.headers.get("X-Frame-Options") == "DENY"
    assert r.headers.get("Referrer-Policy") == "same-origin"


def test_cors_allowed_origin(client):
    r = client.get("/api/health", headers={"Origin": DASHBOARD})
    assert r.headers.get("Access-Control-Allow-Origin") == DASHBOARD
    assert "Origin" in r.headers.get("Vary", "")

    r = client.get("/api/health", headers={"Origin": "http://localhost:5173"})
    assert r.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def test_cors_other_origin_gets_no_headers(client):
    r = client.get("/api/health", headers={"Origin": "https://evil.example"})
    assert r.status_code == 200
    assert "Access-Control-Allow-Origin" not in r.headers


def test_cors_preflight(client):
    r = client.options(
        "/api/requests/abc/status",
        headers={
            "Origin": DASHBOARD,
            "Access-Control-Request-Method": "PATCH",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert r.status_code == 204
    assert r.headers["Access-Control-Allow-Origin"] == DASHBOARD
    assert r.headers["Access-Control-Allow-Methods"] == "GET, POST, PATCH, DELETE"
    assert r.headers["Access-Control-Allow-Headers"] == "Content-Type"


def test_cors_origins_configurable(tmp_path):
    app = make_app(tmp_path, CORS_ORIGINS=["https://admin.example"])
    client = app.test_client()

    r = client.get("/api/health", headers={"Origin": "https://admin.example"})
    assert r.headers.get("Access-Control-Allow-Origin") == "https://admin.example"
    r = client.get("/api/health", headers={"Origin": DASHBOARD})
    assert "Access-Control-Allow-Origin" not in r.headers


def test_unknown_api_route_is_json_404(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.get_json() == {"message": "Not Found"}
