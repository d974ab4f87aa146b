"""Content store models.

The tables follow the WordPress layout the API was built to expose: users,
options, posts (pages are posts with ``post_type == "page"``), postmeta key
value rows, and menus whose items form a tree.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from content_service.core.database import Base, IntegerPKMixin

PAGE_POST_TYPE = "page"
PUBLISHED = "publish"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class User(Base, IntegerPKMixin):
    """A registered author or the anonymous viewer."""

    __tablename__ = "users"

    login: Mapped[str] = mapped_column(String(60), unique=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String(250), default="", nullable=False)
    email: Mapped[str] = mapped_column(String(100), default="", nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, login={self.login!r})>"


class Option(Base):
    """A site-wide name/value option."""

    __tablename__ = "options"

    option_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    option_name: Mapped[str] = mapped_column(String(191), unique=True, nullable=False)
    option_value: Mapped[str] = mapped_column(Text, default="", nullable=False)

    def __repr__(self) -> str:
        return f"<Option(option_id={self.option_id}, option_name={self.option_name!r})>"


class Post(Base, IntegerPKMixin):
    """A post, page, attachment or any other post type."""

    __tablename__ = "posts"

    post_title: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_excerpt: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_status: Mapped[str] = mapped_column(String(20), default=PUBLISHED, nullable=False)
    post_type: Mapped[str] = mapped_column(String(20), default="post", nullable=False)
    post_name: Mapped[str] = mapped_column(String(200), default="", nullable=False, index=True)
    post_parent: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    menu_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    guid: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    post_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False,
    )

    __table_args__ = (
        Index("ix_posts_type_status_date", "post_type", "post_status", "post_date"),
    )

    @property
    def is_page(self) -> bool:
        """Whether this row is a page rather than a post of another type."""
        return self.post_type == PAGE_POST_TYPE

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, post_type={self.post_type!r}, post_name={self.post_name!r})>"


class Postmeta(Base):
    """A metadata key/value attached to a post."""

    __tablename__ = "postmeta"

    meta_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    meta_key: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    meta_value: Mapped[str] = mapped_column(Text, default="", nullable=False)

    def __repr__(self) -> str:
        return f"<Postmeta(meta_id={self.meta_id}, post_id={self.post_id}, meta_key={self.meta_key!r})>"


class Menu(Base, IntegerPKMixin):
    """A named navigation menu."""

    __tablename__ = "menus"

    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Menu(id={self.id}, name={self.name!r})>"


class MenuItem(Base, IntegerPKMixin):
    """One entry of a menu, linking to a post; items nest via ``parent_id``."""

    __tablename__ = "menu_items"

    menu_id: Mapped[int] = mapped_column(
        ForeignKey("menus.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    linked_id: Mapped[int | None] = mapped_column(
        ForeignKey("posts.id", ondelete="SET NULL"), nullable=True,
    )
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("menu_items.id", ondelete="CASCADE"), nullable=True,
    )
    order: Mapped[int] = mapped_column("item_order", Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<MenuItem(id={self.id}, menu_id={self.menu_id}, linked_id={self.linked_id})>"


__all__ = [
    "PAGE_POST_TYPE",
    "PUBLISHED",
    "Menu",
    "MenuItem",
    "Option",
    "Post",
    "Postmeta",
    "User",
]
