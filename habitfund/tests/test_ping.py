from flask.testing import FlaskClient

from habitfund import __version__


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong", "version": __version__, "env": "test"}


def test_request_id_is_echoed(client: FlaskClient):
    response = client.get("/api/ping", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


def test_request_id_is_generated_when_missing(client: FlaskClient):
    response = client.get("/api/ping")

    assert len(response.headers["X-Request-ID"]) == 32
