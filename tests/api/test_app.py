"""
Integration tests for the FastAPI application
"""

import pytest
from fastapi.testclient import TestClient

from roster.api.app import create_app
from roster.config import settings
from roster.store import UserStore


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client


def graphql(client, query, variables=None):
    resp = client.post("/graphql", json={"query": query, "variables": variables})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert "errors" not in body, body
    return body["data"]


@pytest.mark.integration
def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "version": "0.1.0", "users": 2}


@pytest.mark.integration
def test_add_then_list_over_http(client):
    data = graphql(
        client,
        "mutation Add($user: NewUserInput) { addUser(user: $user) { code user { id } } }",
        {"user": {"name": "test3", "email": "email3"}},
    )
    assert data["addUser"] == {"code": "200", "user": {"id": "3"}}

    users = graphql(client, "{ users { id name } }")["users"]
    assert [u["id"] for u in users] == ["1", "2", "3"]


@pytest.mark.integration
def test_request_id_header(client):
    resp = client.post("/graphql", json={"query": "{ test }"})

    assert resp.json() == {"data": {"test": "cool beans!"}}
    assert resp.headers.get("X-Request-ID")


@pytest.mark.integration
def test_store_cleared_on_shutdown(store):
    with TestClient(create_app(store)) as client:
        graphql(client, "{ users { id } }")
        assert len(store) == 2

    assert len(store) == 0


@pytest.mark.integration
def test_unseeded_store(monkeypatch):
    monkeypatch.setattr(settings, "seed_users", False)

    app = create_app()

    assert isinstance(app.state.store, UserStore)
    assert len(app.state.store) == 0
    assert app.state.store.next_id == 1
