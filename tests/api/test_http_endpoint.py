"""Tests for the HTTP surface: GraphQL endpoint, correlation ids, problem+json."""
from __future__ import annotations

from httpx import ASGITransport, AsyncClient

from content_service.app.main import create_app
from content_service.core.exceptions import NotFoundException
from content_service.core.relay import to_global_id
from content_service.core.settings import clear_all_caches
from content_service.features.graphql.router import CORRELATION_HEADER

VIEWER_QUERY = "query { viewer { id login } }"


async def test_graphql_post(client):
    response = await client.post("/graphql", json={"query": VIEWER_QUERY})

    assert response.status_code == 200
    body = response.json()
    assert "errors" not in body
    assert body["data"]["viewer"] == {"id": to_global_id("User", 1), "login": "admin"}


async def test_node_over_http(client):
    response = await client.post(
        "/graphql",
        json={
            "query": "query Node($id: ID!) { node(id: $id) { __typename id } }",
            "variables": {"id": to_global_id("Menu", 1)},
        },
    )

    assert response.json()["data"]["node"] == {"__typename": "Menu", "id": to_global_id("Menu", 1)}


async def test_correlation_id_is_echoed(client):
    response = await client.post(
        "/graphql",
        json={"query": VIEWER_QUERY},
        headers={CORRELATION_HEADER: "abc-123"},
    )

    assert response.headers[CORRELATION_HEADER] == "abc-123"


async def test_correlation_id_is_generated(client):
    response = await client.post("/graphql", json={"query": VIEWER_QUERY})

    assert len(response.headers[CORRELATION_HEADER]) == 32


async def test_user_error_in_graphql_body(client):
    response = await client.post(
        "/graphql",
        json={"query": 'query { node(id: "%%%") { id } }'},
    )

    assert response.status_code == 200
    error = response.json()["errors"][0]
    assert error["extensions"]["code"] == "malformed-identifier"


async def test_graphql_disabled(monkeypatch, node_registry):
    monkeypatch.setenv("GRAPHQL_ENABLED", "false")
    clear_all_caches()
    app = create_app(node_registry=node_registry)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.post("/graphql", json={"query": VIEWER_QUERY})

    assert response.status_code == 404


async def test_app_exception_as_problem_json(node_registry):
    app = create_app(node_registry=node_registry)

    async def missing() -> None:
        raise NotFoundException("Post 42 not found", type="post-not-found", extra={"post_id": 42})

    app.add_api_route("/missing", missing)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/missing")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("application/problem+json")
    body = response.json()
    assert body["type"] == "post-not-found"
    assert body["title"] == "Not Found"
    assert body["status"] == 404
    assert body["detail"] == "Post 42 not found"
    assert body["post_id"] == 42


async def test_unexpected_exception_is_generic_500(node_registry):
    app = create_app(node_registry=node_registry)

    async def boom() -> None:
        msg = "secret internals"
        raise RuntimeError(msg)

    app.add_api_route("/boom", boom)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["type"] == "internal-error"
    assert "secret" not in response.text


async def test_lifespan_creates_tables_and_registry(tmp_path, monkeypatch):
    from content_service.app.lifespan import lifespan
    from content_service.infra.database.session import get_engine

    db_file = tmp_path / "content.db"
    monkeypatch.setenv("DB_URL", f"sqlite+aiosqlite:///{db_file}")
    monkeypatch.setenv("DB_CREATE_TABLES", "true")
    monkeypatch.setenv("LOG_CONSOLE_ENABLED", "false")
    clear_all_caches()
    get_engine.cache_clear()
    app = create_app()
    app.state.node_registry = None

    async with lifespan(app):
        assert app.state.node_registry is not None
        assert db_file.exists()

    assert get_engine.cache_info().currsize == 0
