"""Non-table content shapes."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

PUBLIC_SETTINGS_ID = "public"


class PublicSettings(BaseModel):
    """The single public settings object exposed to clients."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default=PUBLIC_SETTINGS_ID, description="Constant local id")
    uploads: str = Field(description="Base URL for uploaded media")


@dataclass(slots=True)
class MenuItemNode:
    """A menu item with its nested children, ordered by ``order`` then id."""

    id: int
    linked_id: int | None
    order: int
    children: list[MenuItemNode] = field(default_factory=list)


__all__ = ["PUBLIC_SETTINGS_ID", "MenuItemNode", "PublicSettings"]
