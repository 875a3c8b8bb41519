#!/usr/bin/env python3
"""
Tests for the Flask routes and the unified error envelope.
"""

from unittest.mock import MagicMock

import pytest

from errors import ApiError, ERROR_MESSAGES, FETCH_FAILED
from orchestrator import Orchestrator
from webapp import create_app

URL = "https://example.com/post"


@pytest.fixture
def fetch(article_html):
    return MagicMock(return_value=article_html)


@pytest.fixture
def complete():
    return MagicMock(return_value="AI text")


@pytest.fixture
def client(fetch, complete):
    app = create_app(Orchestrator(fetch=fetch, complete=complete, fetch_timeout=30))
    return app.test_client()


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    page = resp.get_data(as_text=True)
    assert "Анализ статей" in page
    assert "fetch_timeout" in page  # error copy is embedded for the form


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_parse(client):
    resp = client.post("/api/parse", json={"url": URL})
    assert resp.status_code == 200
    data = resp.get_json()
    assert set(data) == {"date", "title", "content"}
    assert data["title"] == "Hello"


def test_parse_errors_use_envelope(client):
    resp = client.post("/api/parse", json={})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Не передан URL", "errorType": "validation"}


def test_non_json_body_is_validation(client):
    resp = client.post("/api/summary", data="url=x", content_type="text/plain")
    assert resp.status_code == 400
    assert resp.get_json()["errorType"] == "validation"


@pytest.mark.parametrize("task, key", [
    ("summary", "summary"),
    ("theses", "theses"),
    ("telegram", "telegramPost"),
])
def test_article_tasks(client, task, key, api_key):
    resp = client.post(f"/api/{task}", json={"url": URL})
    assert resp.status_code == 200
    assert resp.get_json() == {key: "AI text"}


def test_translate(client, complete, api_key):
    resp = client.post("/api/translate", json={"content": "Hello"})
    assert resp.get_json() == {"translation": "AI text"}
    assert complete.call_args.args[0].user_text == "Hello"


@pytest.mark.parametrize("task", ["summary", "theses", "telegram", "translate"])
def test_missing_credential(client, complete, task):
    resp = client.post(f"/api/{task}", json={"url": URL, "content": "Hello"})
    assert resp.status_code == 500
    assert resp.get_json() == {
        "error": ERROR_MESSAGES["config_error"],
        "errorType": "config_error",
    }
    complete.assert_not_called()


def test_fetch_failure(client, fetch, api_key):
    fetch.side_effect = ApiError(FETCH_FAILED)
    resp = client.post("/api/summary", json={"url": URL})
    assert resp.status_code == 502
    assert resp.get_json()["errorType"] == "fetch_failed"


def test_content_extraction(client, fetch):
    fetch.return_value = "<html><body></body></html>"
    resp = client.post("/api/parse", json={"url": URL})
    assert resp.status_code == 422
    assert resp.get_json()["errorType"] == "content_extraction"


def test_unexpected_error_is_server_error(client, fetch):
    fetch.side_effect = RuntimeError("socket exploded")
    resp = client.post("/api/parse", json={"url": URL})
    assert resp.status_code == 500
    data = resp.get_json()
    assert data["errorType"] == "server_error"
    assert "socket" not in data["error"]


def test_unknown_task(client):
    resp = client.post("/api/poem", json={"url": URL})
    assert resp.status_code == 404
    assert resp.get_json()["errorType"] == "validation"


def test_wrong_method_uses_envelope(client):
    resp = client.get("/api/parse")
    assert resp.status_code == 405
    assert resp.get_json()["errorType"] == "validation"
    assert resp.get_json()["error"]


def test_unknown_route_uses_envelope(client):
    resp = client.post("/api/summary/extra", json={"url": URL})
    assert resp.status_code == 404
    assert resp.get_json()["errorType"] == "validation"
