"""Tests for the content node kinds and their registry."""
from __future__ import annotations

import pytest

from content_service.core.relay import to_global_id
from content_service.features.content import (
    ContentRepository,
    NodeKind,
    PublicSettings,
    build_node_registry,
    get_node_registry,
)
from content_service.features.content.models import Menu, Option, Post, Postmeta, User


def test_every_kind_is_registered():
    registry = build_node_registry()

    assert registry.kinds == tuple(NodeKind)


def test_default_registry_is_shared():
    assert get_node_registry() is get_node_registry()


@pytest.mark.parametrize(
    ("entity", "kind"),
    [
        (User(id=1, login="a"), NodeKind.USER),
        (PublicSettings(uploads="/u"), NodeKind.SETTING),
        (Option(option_id=1, option_name="x"), NodeKind.OPTION),
        (Post(id=1, post_type="page"), NodeKind.PAGE),
        (Post(id=1, post_type="post"), NodeKind.POST),
        (Post(id=1, post_type="attachment"), NodeKind.POST),
        (Postmeta(meta_id=1, post_id=1, meta_key="k"), NodeKind.POSTMETA),
        (Menu(id=1, name="main"), NodeKind.MENU),
    ],
)
def test_classify(node_registry, entity, kind):
    assert node_registry.classify(entity) is kind


@pytest.mark.parametrize(
    ("kind", "local_id"),
    [
        (NodeKind.USER, "1"),
        (NodeKind.SETTING, "public"),
        (NodeKind.OPTION, "2"),
        (NodeKind.PAGE, "4"),
        (NodeKind.POST, "1"),
        (NodeKind.POSTMETA, "3"),
        (NodeKind.MENU, "1"),
    ],
)
async def test_resolve_then_classify_round_trips(node_registry, seeded_session, kind, local_id):
    repo = ContentRepository(seeded_session)

    entity = await node_registry.resolve(node_registry.encode(kind, local_id), repo)

    assert entity is not None
    assert node_registry.classify(entity) is kind
    assert node_registry.global_id_of(entity) == to_global_id(kind.value, local_id)


async def test_resolve_matches_fetch(node_registry, seeded_session):
    repo = ContentRepository(seeded_session)

    resolved = await node_registry.resolve(node_registry.encode(NodeKind.POST, 2), repo)

    assert resolved is await repo.get_post(2)


async def test_post_id_under_page_kind_is_not_found(node_registry, seeded_session):
    repo = ContentRepository(seeded_session)

    assert await node_registry.resolve(node_registry.encode(NodeKind.PAGE, 1), repo) is None


async def test_any_setting_id_resolves_to_the_singleton(node_registry, seeded_session):
    repo = ContentRepository(seeded_session)

    resolved = await node_registry.resolve(node_registry.encode(NodeKind.SETTING, "anything"), repo)

    assert resolved is repo.public_settings()


@pytest.mark.parametrize(
    "local_id",
    ["99999999999999999999", str(2**63), "1" * 5000],
)
async def test_out_of_range_id_is_not_found(node_registry, seeded_session, local_id):
    repo = ContentRepository(seeded_session)

    assert await node_registry.resolve(to_global_id("User", local_id), repo) is None


@pytest.mark.parametrize("local_id", ["0_1", " 1", "1 ", "+1", "01", "-1", "١"])
async def test_non_canonical_id_is_not_found(node_registry, seeded_session, local_id):
    repo = ContentRepository(seeded_session)

    assert await node_registry.resolve(to_global_id("User", local_id), repo) is None


async def test_resolved_node_keeps_the_requested_id(node_registry, seeded_session):
    repo = ContentRepository(seeded_session)
    global_id = to_global_id("User", "1")

    user = await node_registry.resolve(global_id, repo)

    assert node_registry.global_id_of(user) == global_id
