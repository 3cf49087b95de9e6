from fastapi.testclient import TestClient
from main import app


def test_hello_plain_text(client):
    resp = client.get("/hello")
    assert resp.status_code == 200
    assert resp.text == "Hello World"
    assert resp.headers["content-type"].startswith("text/plain")


def test_hello_json(client):
    resp = client.get("/hello_json")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"msg": "hello world"}


def test_health_returns_ok(client):
    """
    Outcome:
        GET /health returns 200 with {"status": "ok"}.

    Why:
        Quick liveness check so callers (and CI) can verify the app is up.
    """
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_module_app_serves_default_directory():
    """The module-level `app` (used by uvicorn) is wired with the default directory."""
    resp = TestClient(app).get("/", headers={"Authorization": "Basic UGV0ZXI=:MTIzNA=="})
    assert resp.status_code == 200
    assert resp.json()["secret"] == "This is a secret from Peter"


def test_unknown_route_is_404(client):
    assert client.get("/nope").status_code == 404


def test_client_fixture_is_isolated_from_module_app(client):
    client.post("/add", json={"id": 77, "username": "Scratch"})
    assert client.get("/user/77").status_code == 200
    assert TestClient(app).get("/user/77").status_code == 404
