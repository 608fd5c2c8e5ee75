"""Catalogue item domain model."""

from typing import Optional

from pydantic import Field

from app.models.domain.base import CamelModel, ProjectItem, overlay


class CatalogueItemCreate(CamelModel):
    """Payload for creating a catalogue item (creature, artifact, faction...)."""
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    description: str = ""
    linked_character_ids: list[str] = Field(default_factory=list)
    linked_world_id: Optional[str] = None
    linked_event_ids: list[str] = Field(default_factory=list)
    linked_writing_ids: list[str] = Field(default_factory=list)


class CatalogueItemUpdate(CamelModel):
    """Payload for updating a catalogue item."""
    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    linked_character_ids: Optional[list[str]] = None
    linked_world_id: Optional[str] = None
    linked_event_ids: Optional[list[str]] = None
    linked_writing_ids: Optional[list[str]] = None


class CatalogueItem(ProjectItem):
    """A lore item grouped under a free-text category."""
    name: str
    category: str
    description: str = ""
    linked_character_ids: list[str] = Field(default_factory=list)
    linked_world_id: Optional[str] = None
    linked_event_ids: list[str] = Field(default_factory=list)
    linked_writing_ids: list[str] = Field(default_factory=list)

    def apply(self, patch: CatalogueItemUpdate) -> "CatalogueItem":
        return overlay(self, patch, nullable={"linked_world_id"})
