"""World domain model."""

from pydantic import Field
from typing import Optional

from app.models.domain.base import CamelModel, ProjectItem, overlay


class WorldCreate(CamelModel):
    """Payload for creating a new world."""
    name: str = Field(min_length=1)
    theme: str = ""
    setting: str = ""
    description: str = ""
    linked_character_ids: list[str] = Field(default_factory=list)
    linked_writing_ids: list[str] = Field(default_factory=list)
    linked_event_ids: list[str] = Field(default_factory=list)


class WorldUpdate(CamelModel):
    """Payload for updating a world."""
    name: Optional[str] = Field(default=None, min_length=1)
    theme: Optional[str] = None
    setting: Optional[str] = None
    description: Optional[str] = None
    linked_character_ids: Optional[list[str]] = None
    linked_writing_ids: Optional[list[str]] = None
    linked_event_ids: Optional[list[str]] = None


class World(ProjectItem):
    """A world (setting) described inside a project."""
    name: str
    theme: str = ""
    setting: str = ""
    description: str = ""
    linked_character_ids: list[str] = Field(default_factory=list)
    linked_writing_ids: list[str] = Field(default_factory=list)
    linked_event_ids: list[str] = Field(default_factory=list)

    def apply(self, patch: WorldUpdate) -> "World":
        return overlay(self, patch)
