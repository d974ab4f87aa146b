"""Node kinds of the content graph and the registry wiring them to the store.

Each kind gets a fetch function on :class:`ContentRepository`, a predicate
telling its entities apart, and an exemplar the registry uses at startup to
prove the predicates never overlap. Pages and posts share the ``posts``
table, so their predicates look at ``post_type`` rather than the class.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from operator import attrgetter

from content_service.core.relay import NodeDefinition, NodeRegistry
from content_service.features.content.models import (
    PAGE_POST_TYPE,
    Menu,
    Option,
    Post,
    Postmeta,
    User,
)
from content_service.features.content.repository import ContentRepository
from content_service.features.content.schemas import PublicSettings


class NodeKind(StrEnum):
    """Every kind of entity reachable through a global id."""

    USER = "User"
    SETTING = "Setting"
    OPTION = "Option"
    PAGE = "Page"
    POST = "Post"
    POSTMETA = "Postmeta"
    MENU = "Menu"


type ContentNodeRegistry = NodeRegistry[NodeKind, ContentRepository]


def _is_page(entity: object) -> bool:
    return isinstance(entity, Post) and entity.post_type == PAGE_POST_TYPE


def _is_post(entity: object) -> bool:
    return isinstance(entity, Post) and entity.post_type != PAGE_POST_TYPE


def _fetch_settings(repo: ContentRepository, _local_id: str) -> PublicSettings:
    # Singleton: every local id names the same object.
    return repo.public_settings()


def build_node_registry() -> ContentNodeRegistry:
    """Build the registry for every :class:`NodeKind`.

    Raises:
        RegistryConfigurationError: If a kind is missing or predicates overlap.
    """
    return NodeRegistry(
        NodeKind,
        [
            NodeDefinition(
                kind=NodeKind.USER,
                fetch=ContentRepository.get_user,
                is_type_of=lambda entity: isinstance(entity, User),
                local_id=attrgetter("id"),
                exemplar=lambda: User(id=0, login="exemplar"),
            ),
            NodeDefinition(
                kind=NodeKind.SETTING,
                fetch=_fetch_settings,
                is_type_of=lambda entity: isinstance(entity, PublicSettings),
                local_id=attrgetter("id"),
                exemplar=lambda: PublicSettings(uploads=""),
            ),
            NodeDefinition(
                kind=NodeKind.OPTION,
                fetch=ContentRepository.get_option,
                is_type_of=lambda entity: isinstance(entity, Option),
                local_id=attrgetter("option_id"),
                exemplar=lambda: Option(option_id=0, option_name="exemplar"),
            ),
            NodeDefinition(
                kind=NodeKind.PAGE,
                fetch=ContentRepository.get_page,
                is_type_of=_is_page,
                local_id=attrgetter("id"),
                exemplar=lambda: Post(id=0, post_type=PAGE_POST_TYPE),
            ),
            NodeDefinition(
                kind=NodeKind.POST,
                fetch=ContentRepository.get_post,
                is_type_of=_is_post,
                local_id=attrgetter("id"),
                exemplar=lambda: Post(id=0, post_type="post"),
            ),
            NodeDefinition(
                kind=NodeKind.POSTMETA,
                fetch=ContentRepository.get_postmeta,
                is_type_of=lambda entity: isinstance(entity, Postmeta),
                local_id=attrgetter("meta_id"),
                exemplar=lambda: Postmeta(meta_id=0, post_id=0, meta_key="exemplar"),
            ),
            NodeDefinition(
                kind=NodeKind.MENU,
                fetch=ContentRepository.get_menu,
                is_type_of=lambda entity: isinstance(entity, Menu),
                local_id=attrgetter("id"),
                exemplar=lambda: Menu(id=0, name="exemplar"),
            ),
        ],
    )


@lru_cache(maxsize=1)
def get_node_registry() -> ContentNodeRegistry:
    """Process-wide registry, built on first use and immutable afterwards."""
    return build_node_registry()


__all__ = [
    "ContentNodeRegistry",
    "NodeKind",
    "build_node_registry",
    "get_node_registry",
]
