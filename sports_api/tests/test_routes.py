"""Tests for the sports relay routes: GET /, OPTIONS /, /health."""
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from sports_api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _response(status_code: int, **kwargs) -> httpx.Response:
    return httpx.Response(status_code, request=httpx.Request("GET", "https://api.sportdb.dev"), **kwargs)


def test_default_path_forwarded(client):
    with patch("sports_api.relay.httpx.get", return_value=_response(200, json=[{"id": 1}])) as mock_get:
        r = client.get("/")
    assert r.status_code == 200
    assert r.json() == [{"id": 1}]
    assert mock_get.call_args[0][0] == "https://api.sportdb.dev/api/flashscore/sports"


def test_explicit_path_forwarded(client):
    with patch("sports_api.relay.httpx.get", return_value=_response(200, json={"leagues": []})) as mock_get:
        r = client.get("/", params={"path": "/api/flashscore/leagues"})
    assert r.status_code == 200
    assert r.json() == {"leagues": []}
    assert mock_get.call_args[0][0] == "https://api.sportdb.dev/api/flashscore/leagues"


def test_base_url_override(client, monkeypatch):
    monkeypatch.setenv("SPORTS_API_BASE_URL", "https://mirror.example")
    with patch("sports_api.relay.httpx.get", return_value=_response(200, json={})) as mock_get:
        client.get("/", params={"path": "/api/flashscore/fixtures"})
    assert mock_get.call_args[0][0] == "https://mirror.example/api/flashscore/fixtures"


def test_upstream_error_status_relayed(client):
    with patch("sports_api.relay.httpx.get", return_value=_response(503, text="down")):
        r = client.get("/", params={"path": "/api/flashscore/events/recent"})
    assert r.status_code == 503
    assert r.json() == {"error": "API error: Service Unavailable"}


def test_upstream_transport_error_returns_500(client):
    with patch("sports_api.relay.httpx.get", side_effect=httpx.ConnectError("connection refused")):
        r = client.get("/")
    assert r.status_code == 500
    assert r.json() == {"error": "connection refused"}


def test_upstream_non_json_returns_500(client):
    with patch("sports_api.relay.httpx.get", return_value=_response(200, text="<html>")):
        r = client.get("/")
    assert r.status_code == 500
    assert "error" in r.json()


def test_invalid_path_returns_400_without_fetch(client):
    with patch("sports_api.relay.httpx.get") as mock_get:
        r = client.get("/", params={"path": "@evil.example/steal"})
    assert r.status_code == 400
    assert "error" in r.json()
    mock_get.assert_not_called()


def test_missing_api_key_returns_500_without_fetch(client, monkeypatch):
    monkeypatch.delenv("SPORTS_API_KEY")
    with patch("sports_api.relay.httpx.get") as mock_get:
        r = client.get("/", params={"path": "/api/flashscore/leagues"})
    assert r.status_code == 500
    assert r.json() == {"error": "Sports API not configured"}
    mock_get.assert_not_called()


def test_api_key_not_leaked_in_error(client):
    with patch("sports_api.relay.httpx.get", return_value=_response(401, json={})):
        r = client.get("/")
    assert r.status_code == 401
    assert "sports-test-key" not in r.text


def test_bare_options_returns_empty_200(client):
    r = client.options("/")
    assert r.status_code == 200
    assert r.content == b""
    assert r.headers["access-control-allow-origin"] == "*"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json().get("service") == "sports_api"


def test_invalid_timeout_config_returns_json_500_without_fetch(client, monkeypatch):
    monkeypatch.setenv("SPORTS_API_TIMEOUT_SECONDS", "ten")
    with patch("sports_api.relay.httpx.get") as mock_get:
        r = client.get("/", headers={"Origin": "https://app.example"})
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == {"error": "Sports API not configured"}
    assert r.headers["access-control-allow-origin"] == "*"
    mock_get.assert_not_called()


def test_browser_preflight_allowed(client):
    r = client.options(
        "/",
        headers={
            "Origin": "https://app.example",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "authorization, x-client-info, apikey, content-type",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"
    assert "GET" in r.headers["access-control-allow-methods"]
