"""
HTTP-level tests for the /todos endpoints using FastAPI's TestClient.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.app import create_app  # noqa: E402
from api.core.config import Settings  # noqa: E402
from api.services.todo_service import SAMPLE_TODOS  # noqa: E402


def _settings(**overrides) -> Settings:
    values = dict(app_env="test", log_level="WARNING", cors_origins=(), seed_todos=False)
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def app():
    return create_app(_settings())


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def repo(app):
    return app.state.todo_service.repository


def _create(client, title="Remove unused imports", completed=True) -> dict:
    resp = client.post("/todos", json={"title": title, "completed": completed})
    assert resp.status_code == 201
    return resp.json()


def test_get_all_returns_every_todo(client):
    _create(client)
    _create(client, "Write release notes", False)

    resp = client.get("/todos")

    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 1, "title": "Remove unused imports", "completed": True},
        {"id": 2, "title": "Write release notes", "completed": False},
    ]


def test_get_all_empty(client):
    resp = client.get("/todos")
    assert resp.status_code == 200
    assert resp.json() == []


def test_get_todo_when_id_is_found(client):
    _create(client)

    resp = client.get("/todos/1")

    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "title": "Remove unused imports", "completed": True}


def test_get_todo_returns_not_found_with_empty_body(client):
    resp = client.get("/todos/1")
    assert resp.status_code == 404
    assert resp.content == b""


def test_save_todo_persists_it(client, repo):
    resp = client.post("/todos", json={"title": "Remove unused imports", "completed": True})

    assert resp.status_code == 201
    body = resp.json()
    assert body["title"] == "Remove unused imports"
    assert body["completed"] is True
    assert repo.find_by_id(body["id"]) is not None
    assert client.get(f"/todos/{body['id']}").json() == body


def test_save_todo_defaults_completed_to_false(client):
    resp = client.post("/todos", json={"title": "Just a title"})
    assert resp.status_code == 201
    assert resp.json()["completed"] is False


@pytest.mark.parametrize("payload", [{}, {"completed": True}, {"title": 123}])
def test_save_todo_rejects_invalid_body(client, payload):
    resp = client.post("/todos", json=payload)
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_request"


def test_save_todo_rejects_malformed_json(client):
    resp = client.post("/todos", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_delete_todo_when_id_is_found(client):
    created = _create(client)

    resp = client.delete(f"/todos/{created['id']}")

    assert resp.status_code == 200
    assert client.get(f"/todos/{created['id']}").status_code == 404
    assert client.get("/todos").json() == []


def test_delete_todo_returns_not_found(client):
    resp = client.delete("/todos/1")
    assert resp.status_code == 404
    assert resp.content == b""


def test_update_todo_replaces_fields(client):
    created = _create(client, "Draft", False)

    resp = client.patch(f"/todos/{created['id']}", json={"title": "Final", "completed": True})

    assert resp.status_code == 200
    assert resp.json() == {"id": created["id"], "title": "Final", "completed": True}
    assert client.get(f"/todos/{created['id']}").json()["title"] == "Final"


def test_update_todo_keeps_fields_left_out(client):
    created = _create(client, "Draft", False)

    resp = client.patch(f"/todos/{created['id']}", json={"completed": True})

    assert resp.status_code == 200
    assert resp.json() == {"id": created["id"], "title": "Draft", "completed": True}


def test_update_todo_returns_not_found(client):
    resp = client.patch("/todos/5", json={"title": "Ghost"})
    assert resp.status_code == 404
    assert resp.content == b""


def test_update_todo_with_missing_body_is_bad_request(client):
    _create(client)
    resp = client.patch("/todos/1")
    assert resp.status_code == 400


@pytest.mark.parametrize("payload", [{}, {"unknown": 1}, {"title": None}])
def test_update_todo_with_empty_payload_is_bad_request(client, payload):
    _create(client)
    resp = client.patch("/todos/1", json=payload)
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_payload"


def test_update_todo_with_unparseable_body_is_bad_request(client):
    _create(client)
    resp = client.patch("/todos/1", content=b"title=x", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_update_empty_body_wins_over_unknown_id(client):
    resp = client.patch("/todos/99", json={})
    assert resp.status_code == 400


def test_non_numeric_id_is_bad_request(client):
    resp = client.get("/todos/abc")
    assert resp.status_code == 400


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_seeded_app_lists_sample_todos():
    with TestClient(create_app(_settings(seed_todos=True))) as c:
        titles = [todo["title"] for todo in c.get("/todos").json()]
    assert titles == [title for title, _ in SAMPLE_TODOS]


def test_apps_do_not_share_state():
    with TestClient(create_app(_settings())) as first:
        _create(first)
    with TestClient(create_app(_settings())) as second:
        assert second.get("/todos").json() == []
