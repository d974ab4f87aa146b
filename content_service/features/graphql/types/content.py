"""GraphQL types for the content store.

Provides:
- Node types: UserType, SettingType, OptionType, PostType, PageType,
  PostmetaType, MenuType (all implement ``Node``; ``id`` is the global id)
- Publication: interface shared by posts and pages
- MenuItemType: nested menu entries (not nodes)
- Connection types: OptionConnection, PostConnection, PostmetaConnection
- to_node(): maps any stored entity to its node type
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from strawberry.types import Info

from content_service.core.exceptions import InvalidArgumentError
from content_service.core.pagination import paginate
from content_service.features.content import NodeKind
from content_service.features.graphql.context import GraphQLContext
from content_service.features.graphql.types.base import (
    AfterArg,
    BeforeArg,
    FirstArg,
    LastArg,
    Node,
    PageInfoType,
    build_connection,
)

if TYPE_CHECKING:
    from content_service.features.content import ContentNodeRegistry, MenuItemNode, PublicSettings
    from content_service.features.content.models import Menu, Option, Post, Postmeta, User

PostTypeArg = Annotated[
    str | None,
    strawberry.argument(description="Post type to list (defaults to the configured type)"),
]
PostNameArg = Annotated[str, strawberry.argument(description="Slug of a published post or page")]
MenuNameArg = Annotated[str, strawberry.argument(description="Menu name")]
PostIdArg = Annotated[int, strawberry.argument(description="Local id of the post")]


async def _postmeta_connection(
    ctx: GraphQLContext,
    post_id: int,
    first: int | None,
    after: str | None,
    last: int | None,
    before: str | None,
) -> PostmetaConnection:
    connection = await paginate(
        ctx.content.list_postmeta(post_id),
        ctx.connection_args(first, after, last, before),
    )
    return build_connection(
        connection,
        PostmetaConnection,
        PostmetaEdge,
        lambda meta: PostmetaType.from_model(meta, ctx.nodes),
    )


# --- Node types ---


@strawberry.type(name="Setting", description="Public site settings")
class SettingType(Node):
    uploads: str = strawberry.field(description="Base URL for uploaded media")

    @classmethod
    def from_model(cls, settings: PublicSettings, nodes: ContentNodeRegistry) -> SettingType:
        return cls(id=strawberry.ID(nodes.global_id_of(settings)), uploads=settings.uploads)


@strawberry.type(name="Option", description="A site-wide name/value option")
class OptionType(Node):
    option_name: str = strawberry.field(description="Option key")
    option_value: str = strawberry.field(description="Stored value")

    @classmethod
    def from_model(cls, option: Option, nodes: ContentNodeRegistry) -> OptionType:
        return cls(
            id=strawberry.ID(nodes.global_id_of(option)),
            option_name=option.option_name,
            option_value=option.option_value,
        )


@strawberry.type(name="Postmeta", description="A key/value row attached to a post")
class PostmetaType(Node):
    post_id: int = strawberry.field(description="Local id of the owning post")
    meta_key: str = strawberry.field(description="Meta key")
    meta_value: str | None = strawberry.field(description="Meta value")

    @classmethod
    def from_model(cls, meta: Postmeta, nodes: ContentNodeRegistry) -> PostmetaType:
        return cls(
            id=strawberry.ID(nodes.global_id_of(meta)),
            post_id=meta.post_id,
            meta_key=meta.meta_key,
            meta_value=meta.meta_value,
        )


@strawberry.interface(description="Fields shared by posts and pages")
class Publication(Node):
    """Post fields plus the meta-backed resolvers.

    Pages and posts live in the same table; ``to_publication`` picks the
    concrete type from the node registry's classification.
    """

    post_id: strawberry.Private[int]

    post_title: str = strawberry.field(description="Title")
    post_content: str = strawberry.field(description="Body (HTML)")
    post_excerpt: str = strawberry.field(description="Excerpt")
    post_status: str = strawberry.field(description="Publication status")
    post_type: str = strawberry.field(description="Post type")
    post_name: str = strawberry.field(description="Slug")
    post_parent: int = strawberry.field(description="Local id of the parent post, 0 for none")
    menu_order: int = strawberry.field(description="Sort position")
    post_date: datetime | None = strawberry.field(description="Publication date")

    @classmethod
    def from_model(cls, post: Post, nodes: ContentNodeRegistry) -> Any:
        return cls(
            id=strawberry.ID(nodes.global_id_of(post)),
            post_id=post.id,
            post_title=post.post_title,
            post_content=post.post_content,
            post_excerpt=post.post_excerpt,
            post_status=post.post_status,
            post_type=post.post_type,
            post_name=post.post_name,
            post_parent=post.post_parent,
            menu_order=post.menu_order,
            post_date=post.post_date,
        )

    @strawberry.field(description="Layout component chosen for this post")
    async def layout(self, info: Info[GraphQLContext, None]) -> str | None:
        return await info.context.content.get_layout(self.post_id)

    @strawberry.field(description="URL of the featured image")
    async def thumbnail(self, info: Info[GraphQLContext, None]) -> str | None:
        return await info.context.content.get_thumbnail(self.post_id)

    @strawberry.field(description="Meta rows attached to this post")
    async def postmeta(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> PostmetaConnection:
        return await _postmeta_connection(info.context, self.post_id, first, after, last, before)


@strawberry.type(name="Post", description="A blog post or other non-page entry")
class PostType(Publication):
    pass


@strawberry.type(name="Page", description="A static page")
class PageType(Publication):
    pass


def to_publication(post: Post, nodes: ContentNodeRegistry) -> PostType | PageType:
    """Wrap a post row in ``PageType`` or ``PostType`` according to its kind."""
    if nodes.classify(post) is NodeKind.PAGE:
        return PageType.from_model(post, nodes)
    return PostType.from_model(post, nodes)


@strawberry.type(name="MenuItem", description="An entry of a navigation menu")
class MenuItemType:
    """Menu entry with its nested children."""

    id: int = strawberry.field(description="Local id of the menu item")
    linked_id: int | None = strawberry.field(description="Local id of the linked post")
    order: int = strawberry.field(description="Position among siblings")
    children: list[MenuItemType] = strawberry.field(description="Nested entries")

    @classmethod
    def from_node(cls, item: MenuItemNode) -> MenuItemType:
        return cls(
            id=item.id,
            linked_id=item.linked_id,
            order=item.order,
            children=[cls.from_node(child) for child in item.children],
        )

    @strawberry.field(description="The post or page this entry links to")
    async def navitem(self, info: Info[GraphQLContext, None]) -> Publication | None:
        if self.linked_id is None:
            return None
        ctx = info.context
        post = await ctx.content.get_any_post(self.linked_id)
        return to_publication(post, ctx.nodes) if post is not None else None


@strawberry.type(name="Menu", description="A named navigation menu")
class MenuType(Node):
    menu_id: strawberry.Private[int]

    name: str = strawberry.field(description="Menu name")

    @classmethod
    def from_model(cls, menu: Menu, nodes: ContentNodeRegistry) -> MenuType:
        return cls(id=strawberry.ID(nodes.global_id_of(menu)), menu_id=menu.id, name=menu.name)

    @strawberry.field(description="Top-level entries, each with its children")
    async def items(self, info: Info[GraphQLContext, None]) -> list[MenuItemType]:
        roots = await info.context.content.list_menu_items(self.menu_id)
        return [MenuItemType.from_node(item) for item in roots]


@strawberry.type(name="User", description="The viewer and entry point to the content graph")
class UserType(Node):
    """A user; the ``viewer`` field hangs every listing off this type."""

    user_id: strawberry.Private[int]

    login: str = strawberry.field(description="Login name")
    display_name: str = strawberry.field(description="Name shown to readers")
    email: str = strawberry.field(description="Contact email")

    @classmethod
    def from_model(cls, user: User, nodes: ContentNodeRegistry) -> UserType:
        return cls(
            id=strawberry.ID(nodes.global_id_of(user)),
            user_id=user.id,
            login=user.login,
            display_name=user.display_name,
            email=user.email,
        )

    @strawberry.field(description="Public site settings")
    def settings(self, info: Info[GraphQLContext, None]) -> SettingType:
        ctx = info.context
        return SettingType.from_model(ctx.content.public_settings(), ctx.nodes)

    @strawberry.field(description="Site options ordered by id")
    async def options(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> OptionConnection:
        ctx = info.context
        connection = await paginate(
            ctx.content.list_options(),
            ctx.connection_args(first, after, last, before),
        )
        return build_connection(
            connection,
            OptionConnection,
            OptionEdge,
            lambda option: OptionType.from_model(option, ctx.nodes),
        )

    @strawberry.field(description="Published posts of a type, by menu order then newest first")
    async def posts(
        self,
        info: Info[GraphQLContext, None],
        post_type: PostTypeArg = None,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> PostConnection:
        ctx = info.context
        connection = await paginate(
            ctx.content.list_posts(post_type),
            ctx.connection_args(first, after, last, before),
        )
        return build_connection(
            connection,
            PostConnection,
            PostEdge,
            lambda post: to_publication(post, ctx.nodes),
        )

    @strawberry.field(description="A published post or page by slug")
    async def page(self, info: Info[GraphQLContext, None], post_name: PostNameArg) -> Publication | None:
        ctx = info.context
        post = await ctx.content.get_post_by_name(post_name)
        return to_publication(post, ctx.nodes) if post is not None else None

    @strawberry.field(description="A navigation menu by name")
    async def menus(self, info: Info[GraphQLContext, None], name: MenuNameArg) -> MenuType | None:
        ctx = info.context
        menu = await ctx.content.get_menu_by_name(name)
        return MenuType.from_model(menu, ctx.nodes) if menu is not None else None

    @strawberry.field(description="Meta rows of a post")
    async def postmeta(
        self,
        info: Info[GraphQLContext, None],
        post_id: PostIdArg,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> PostmetaConnection:
        return await _postmeta_connection(info.context, post_id, first, after, last, before)


# --- Connection Types ---


@strawberry.type(description="Edge containing an option and its cursor")
class OptionEdge:
    node: OptionType
    cursor: str


@strawberry.type(description="Paginated options")
class OptionConnection:
    edges: list[OptionEdge]
    page_info: PageInfoType


@strawberry.type(description="Edge containing a post or page and its cursor")
class PostEdge:
    node: Publication
    cursor: str


@strawberry.type(description="Paginated posts or pages")
class PostConnection:
    edges: list[PostEdge]
    page_info: PageInfoType


@strawberry.type(description="Edge containing a meta row and its cursor")
class PostmetaEdge:
    node: PostmetaType
    cursor: str


@strawberry.type(description="Paginated meta rows")
class PostmetaConnection:
    edges: list[PostmetaEdge]
    page_info: PageInfoType


def to_node(entity: object, nodes: ContentNodeRegistry) -> Node:
    """Map a stored entity to the GraphQL type of its node kind.

    Raises:
        InvalidArgumentError: If the entity is not of any registered kind.
    """
    kind = nodes.classify(entity)
    match kind:
        case NodeKind.USER:
            return UserType.from_model(entity, nodes)
        case NodeKind.SETTING:
            return SettingType.from_model(entity, nodes)
        case NodeKind.OPTION:
            return OptionType.from_model(entity, nodes)
        case NodeKind.PAGE:
            return PageType.from_model(entity, nodes)
        case NodeKind.POST:
            return PostType.from_model(entity, nodes)
        case NodeKind.POSTMETA:
            return PostmetaType.from_model(entity, nodes)
        case NodeKind.MENU:
            return MenuType.from_model(entity, nodes)
        case None:
            raise InvalidArgumentError(
                f"{type(entity).__name__} is not a node",
                argument="entity",
            )


# Concrete node types; listed on the schema so interface fields can return them.
NODE_TYPES = (
    UserType,
    SettingType,
    OptionType,
    PageType,
    PostType,
    PostmetaType,
    MenuType,
)


__all__ = [
    "NODE_TYPES",
    "MenuItemType",
    "MenuType",
    "OptionConnection",
    "OptionEdge",
    "OptionType",
    "PageType",
    "PostConnection",
    "PostEdge",
    "PostType",
    "PostmetaConnection",
    "PostmetaEdge",
    "PostmetaType",
    "Publication",
    "SettingType",
    "UserType",
    "to_node",
    "to_publication",
]
