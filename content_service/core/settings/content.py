"""Content store settings.

Environment variables use CONTENT_ prefix.
Example: CONTENT_UPLOADS_URL=https://cdn.example.com/uploads
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContentSettings(BaseSettings):
    """Publicly exposed content configuration."""

    uploads_url: str = Field(
        default="/wp-content/uploads",
        description="Base URL for uploaded media, exposed via the public Setting node",
    )
    default_post_type: str = Field(
        default="post",
        min_length=1,
        max_length=20,
        description="Post type listed when a posts connection gets no postType",
    )
    layout_meta_key: str = Field(
        default="page_layout_component",
        description="Postmeta key holding a page's layout component name",
    )
    thumbnail_meta_key: str = Field(
        default="_thumbnail_id",
        description="Postmeta key holding the attachment id of a post thumbnail",
    )

    model_config = SettingsConfigDict(
        env_prefix="CONTENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )
