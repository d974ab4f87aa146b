"""Strawberry types for the content graph."""

from content_service.features.graphql.types.base import Node, PageInfoType
from content_service.features.graphql.types.content import (
    NODE_TYPES,
    MenuItemType,
    MenuType,
    OptionConnection,
    OptionType,
    PageType,
    PostConnection,
    PostmetaConnection,
    PostmetaType,
    PostType,
    Publication,
    SettingType,
    UserType,
    to_node,
    to_publication,
)
from content_service.features.graphql.types.mutations import (
    UpdateOptionInput,
    UpdateOptionPayload,
)

__all__ = [
    "NODE_TYPES",
    "MenuItemType",
    "MenuType",
    "Node",
    "OptionConnection",
    "OptionType",
    "PageInfoType",
    "PageType",
    "PostConnection",
    "PostType",
    "PostmetaConnection",
    "PostmetaType",
    "Publication",
    "SettingType",
    "UpdateOptionInput",
    "UpdateOptionPayload",
    "UserType",
    "to_node",
    "to_publication",
]
