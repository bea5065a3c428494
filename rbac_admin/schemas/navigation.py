"""Navigation API schemas (the menu tree handed to the renderer)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NavigationNodeResponse(BaseModel):
    """One menu node with its accessible children."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    path: str | None = None
    icon: str | None = None
    order: int
    parent_id: int | None = None
    available_actions: list[str] = Field(default_factory=list)
    children: list[NavigationNodeResponse] = Field(default_factory=list)


class NavigationResponse(BaseModel):
    """Response for GET /navigation: group label -> ordered root nodes."""

    navigations: dict[str, list[NavigationNodeResponse]]
