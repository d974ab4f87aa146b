"""Content store feature: models, repository and node kinds.

Models:
    - User, Option, Post (pages are posts with post_type "page"), Postmeta,
      Menu, MenuItem

Repository:
    - ContentRepository: request-scoped queries, ordered list methods

Nodes:
    - NodeKind: the closed set of kinds addressable by global id
    - build_node_registry(): registry wiring each kind to the repository
"""

from content_service.features.content.nodes import (
    ContentNodeRegistry,
    NodeKind,
    build_node_registry,
    get_node_registry,
)
from content_service.features.content.repository import ContentRepository
from content_service.features.content.schemas import MenuItemNode, PublicSettings

__all__ = [
    "ContentNodeRegistry",
    "ContentRepository",
    "MenuItemNode",
    "NodeKind",
    "PublicSettings",
    "build_node_registry",
    "get_node_registry",
]
