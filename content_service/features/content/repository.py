"""Request-scoped access to the content store.

Every list method returns an explicitly ordered sequence so it can be
sliced into a connection; lookups return ``None`` when nothing matches.
Database errors propagate unchanged.

Example:
    repo = ContentRepository(session)
    post = await repo.get_post(42)
    options = await repo.list_options()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select

from content_service.core.exceptions import NotFoundException
from content_service.core.settings import get_content_settings
from content_service.features.content.models import (
    PAGE_POST_TYPE,
    PUBLISHED,
    Menu,
    MenuItem,
    Option,
    Post,
    Postmeta,
    User,
)
from content_service.features.content.schemas import MenuItemNode, PublicSettings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession

    from content_service.core.settings import ContentSettings

logger = logging.getLogger(__name__)

ANONYMOUS_LOGIN = "anonymous"


MAX_ROW_ID = 2**63 - 1


def _as_int(local_id: str | int) -> int | None:
    """Parse a local id written in canonical decimal; anything else cannot match a row.

    ``"01"``, ``"+1"`` or ``" 1"`` would name the same row as ``"1"``, and ids
    past the 64-bit integer column range cannot be bound, so both are ``None``.
    """
    text = str(local_id)
    if not (text.isascii() and text.isdigit()) or (len(text) > 1 and text.startswith("0")):
        return None
    if len(text) > len(str(MAX_ROW_ID)):
        return None
    row_id = int(text)
    return row_id if row_id <= MAX_ROW_ID else None


class ContentRepository:
    """Queries over users, options, posts, postmeta and menus.

    One instance per request, bound to that request's session.
    """

    __slots__ = ("_public_settings", "session", "settings")

    def __init__(
        self,
        session: AsyncSession,
        settings: ContentSettings | None = None,
    ) -> None:
        self.session = session
        self.settings = settings or get_content_settings()
        self._public_settings = PublicSettings(uploads=self.settings.uploads_url)

    # ------------------------------------------------------------------
    # Users and settings
    # ------------------------------------------------------------------

    async def get_viewer(self) -> User:
        """Return the viewer: the first registered user, or a transient anonymous one."""
        stmt = select(User).order_by(User.id).limit(1)
        user = (await self.session.execute(stmt)).scalar_one_or_none()
        if user is None:
            return User(id=0, login=ANONYMOUS_LOGIN, display_name="Anonymous", email="")
        return user

    async def get_user(self, local_id: str | int) -> User | None:
        user_id = _as_int(local_id)
        if user_id is None:
            return None
        return await self.session.get(User, user_id)

    def public_settings(self) -> PublicSettings:
        """The public settings singleton; the same object on every call."""
        return self._public_settings

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    async def get_option(self, local_id: str | int) -> Option | None:
        option_id = _as_int(local_id)
        if option_id is None:
            return None
        return await self.session.get(Option, option_id)

    async def list_options(self) -> Sequence[Option]:
        """All options ordered by ``option_id``."""
        stmt = select(Option).order_by(Option.option_id)
        return (await self.session.execute(stmt)).scalars().all()

    async def set_option(self, local_id: str | int, value: str) -> Option:
        """Update an option's value and commit.

        Raises:
            NotFoundException: If the option does not exist.
        """
        option = await self.get_option(local_id)
        if option is None:
            raise NotFoundException(
                f"Option {local_id} not found",
                type="option-not-found",
                extra={"option_id": str(local_id)},
            )
        option.option_value = value
        await self.session.commit()
        logger.info(
            "Option updated",
            extra={"option_id": option.option_id, "option_name": option.option_name},
        )
        return option

    # ------------------------------------------------------------------
    # Posts and pages
    # ------------------------------------------------------------------

    async def get_post(self, local_id: str | int) -> Post | None:
        """Fetch a non-page post by id (any status)."""
        post_id = _as_int(local_id)
        if post_id is None:
            return None
        stmt = select(Post).where(Post.id == post_id, Post.post_type != PAGE_POST_TYPE)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_page(self, local_id: str | int) -> Post | None:
        """Fetch a page by id (any status)."""
        post_id = _as_int(local_id)
        if post_id is None:
            return None
        stmt = select(Post).where(Post.id == post_id, Post.post_type == PAGE_POST_TYPE)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_any_post(self, local_id: str | int) -> Post | None:
        """Fetch a post of any type, pages included."""
        post_id = _as_int(local_id)
        if post_id is None:
            return None
        return await self.session.get(Post, post_id)

    async def get_post_by_name(self, post_name: str) -> Post | None:
        """Fetch a published post or page by slug; lowest id wins on duplicates."""
        stmt = (
            select(Post)
            .where(Post.post_name == post_name, Post.post_status == PUBLISHED)
            .order_by(Post.id)
            .limit(1)
        )
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def list_posts(self, post_type: str | None = None) -> Sequence[Post]:
        """Published posts of a type, by menu order then newest first."""
        stmt = (
            select(Post)
            .where(
                Post.post_type == (post_type or self.settings.default_post_type),
                Post.post_status == PUBLISHED,
            )
            .order_by(Post.menu_order, Post.post_date.desc(), Post.id.desc())
        )
        return (await self.session.execute(stmt)).scalars().all()

    # ------------------------------------------------------------------
    # Postmeta
    # ------------------------------------------------------------------

    async def get_postmeta(self, local_id: str | int) -> Postmeta | None:
        meta_id = _as_int(local_id)
        if meta_id is None:
            return None
        return await self.session.get(Postmeta, meta_id)

    async def list_postmeta(self, post_id: int | None = None) -> Sequence[Postmeta]:
        """Postmeta rows ordered by ``meta_id``, optionally for one post."""
        stmt = select(Postmeta).order_by(Postmeta.meta_id)
        if post_id is not None:
            stmt = stmt.where(Postmeta.post_id == post_id)
        return (await self.session.execute(stmt)).scalars().all()

    async def get_meta_value(self, post_id: int, meta_key: str) -> str | None:
        """First value stored under ``meta_key`` for a post."""
        stmt = (
            select(Postmeta.meta_value)
            .where(Postmeta.post_id == post_id, Postmeta.meta_key == meta_key)
            .order_by(Postmeta.meta_id)
            .limit(1)
        )
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_layout(self, post_id: int) -> str | None:
        """Layout component name of a post or page."""
        return await self.get_meta_value(post_id, self.settings.layout_meta_key)

    async def get_thumbnail(self, post_id: int) -> str | None:
        """URL of the post's thumbnail attachment."""
        attachment_id = await self.get_meta_value(post_id, self.settings.thumbnail_meta_key)
        if attachment_id is None:
            return None
        attachment = await self.get_any_post(attachment_id)
        return attachment.guid if attachment is not None else None

    # ------------------------------------------------------------------
    # Menus
    # ------------------------------------------------------------------

    async def get_menu(self, local_id: str | int) -> Menu | None:
        menu_id = _as_int(local_id)
        if menu_id is None:
            return None
        return await self.session.get(Menu, menu_id)

    async def get_menu_by_name(self, name: str) -> Menu | None:
        stmt = select(Menu).where(Menu.name == name)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def list_menu_items(self, menu_id: int) -> list[MenuItemNode]:
        """The menu's item tree; siblings ordered by ``order`` then id.

        Items whose parent is missing from the menu are treated as top level.
        """
        stmt = (
            select(MenuItem)
            .where(MenuItem.menu_id == menu_id)
            .order_by(MenuItem.order, MenuItem.id)
        )
        rows = (await self.session.execute(stmt)).scalars().all()

        nodes = {
            row.id: MenuItemNode(id=row.id, linked_id=row.linked_id, order=row.order)
            for row in rows
        }
        roots: list[MenuItemNode] = []
        for row in rows:
            parent = nodes.get(row.parent_id) if row.parent_id is not None else None
            if parent is None:
                roots.append(nodes[row.id])
            else:
                parent.children.append(nodes[row.id])
        return roots


__all__ = ["ANONYMOUS_LOGIN", "ContentRepository"]
