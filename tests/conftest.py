"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings that keep tests self-contained
    - Database Fixtures: in-memory SQLite engine, session and seeded content
    - Node Fixtures: the node registry
    - GraphQL Fixtures: request context
    - Application Fixtures: FastAPI app and HTTP client
"""

from __future__ import annotations

from datetime import UTC, datetime
import os
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Iterator

    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from content_service.features.content import ContentNodeRegistry
    from content_service.features.graphql.context import GraphQLContext

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DB_CREATE_TABLES", "false")
os.environ.setdefault("GRAPHQL_ENABLED", "true")


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings so monkeypatched env vars take effect."""
    from content_service.core.settings import clear_all_caches

    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Create async SQLAlchemy engine with in-memory SQLite.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create the content tables and provide a session."""
    from content_service.infra.database import create_tables

    await create_tables(db_engine)

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Session over a small WordPress-like site.

    Posts:
        1 "hello-world" post, published 2024-01-03, layout + thumbnail meta
        2 "second-post" post, published 2024-01-02
        3 "draft-post"  post, draft
        4 "about"       page, published
        5 "pic"         attachment (thumbnail of post 1)
        6 "third-post"  post, published 2024-01-01

    Menu "main": item 2 -> post 1 (order 0), item 1 -> page 4 (order 1)
    with child item 3 -> post 6.
    """
    from content_service.features.content.models import (
        Menu,
        MenuItem,
        Option,
        Post,
        Postmeta,
        User,
    )

    db_session.add_all([
        User(id=1, login="admin", display_name="Site Admin", email="admin@example.com"),
        User(id=2, login="editor", display_name="Editor", email="editor@example.com"),
        Option(option_id=1, option_name="siteurl", option_value="http://example.com"),
        Option(option_id=2, option_name="blogname", option_value="Example Blog"),
        Option(option_id=3, option_name="home", option_value="http://example.com"),
        Post(
            id=1,
            post_title="Hello World",
            post_name="hello-world",
            post_type="post",
            post_status="publish",
            post_date=datetime(2024, 1, 3, tzinfo=UTC),
        ),
        Post(
            id=2,
            post_title="Second Post",
            post_name="second-post",
            post_type="post",
            post_status="publish",
            post_date=datetime(2024, 1, 2, tzinfo=UTC),
        ),
        Post(
            id=3,
            post_title="Draft",
            post_name="draft-post",
            post_type="post",
            post_status="draft",
            post_date=datetime(2024, 1, 4, tzinfo=UTC),
        ),
        Post(
            id=4,
            post_title="About",
            post_name="about",
            post_type="page",
            post_status="publish",
            post_date=datetime(2023, 12, 1, tzinfo=UTC),
        ),
        Post(
            id=5,
            post_title="Picture",
            post_name="pic",
            post_type="attachment",
            post_status="inherit",
            guid="http://example.com/wp-content/uploads/pic.jpg",
            post_date=datetime(2024, 1, 3, tzinfo=UTC),
        ),
        Post(
            id=6,
            post_title="Third Post",
            post_name="third-post",
            post_type="post",
            post_status="publish",
            post_date=datetime(2024, 1, 1, tzinfo=UTC),
        ),
        Postmeta(meta_id=1, post_id=1, meta_key="page_layout_component", meta_value="PostLayout"),
        Postmeta(meta_id=2, post_id=1, meta_key="_thumbnail_id", meta_value="5"),
        Postmeta(meta_id=3, post_id=4, meta_key="page_layout_component", meta_value="FrontPage"),
        Postmeta(meta_id=4, post_id=1, meta_key="views", meta_value="10"),
        Menu(id=1, name="main"),
        MenuItem(id=1, menu_id=1, linked_id=4, parent_id=None, order=1),
        MenuItem(id=2, menu_id=1, linked_id=1, parent_id=None, order=0),
        MenuItem(id=3, menu_id=1, linked_id=6, parent_id=1, order=0),
    ])
    await db_session.commit()
    return db_session


# ============================================================================
# Node Fixtures
# ============================================================================


@pytest.fixture
def node_registry() -> ContentNodeRegistry:
    """Registry for every content node kind."""
    from content_service.features.content import build_node_registry

    return build_node_registry()


# ============================================================================
# GraphQL Fixtures
# ============================================================================


@pytest.fixture
def graphql_context(
    seeded_session: AsyncSession,
    node_registry: ContentNodeRegistry,
) -> GraphQLContext:
    """GraphQL context over the seeded content store."""
    from content_service.core.settings import GraphQLSettings
    from content_service.features.content import ContentRepository
    from content_service.features.graphql.context import GraphQLContext

    return GraphQLContext(
        session=seeded_session,
        content=ContentRepository(seeded_session),
        nodes=node_registry,
        settings=GraphQLSettings(default_page_size=10, max_page_size=20),
        correlation_id="test-correlation-id",
    )


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(seeded_session: AsyncSession, node_registry: ContentNodeRegistry) -> FastAPI:
    """FastAPI application whose database dependency yields the seeded session."""
    from content_service.app.main import create_app
    from content_service.core.dependencies.database import get_db_session

    application = create_app(node_registry=node_registry)

    async def _override_session() -> AsyncGenerator[AsyncSession]:
        yield seeded_session

    application.dependency_overrides[get_db_session] = _override_session
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client bound to the app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
