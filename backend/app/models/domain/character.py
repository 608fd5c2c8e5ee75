"""Character domain model."""

from typing import Optional

from pydantic import Field

from app.models.domain.base import CamelModel, ProjectItem, overlay


class CharacterTrait(CamelModel):
    """A single labelled trait shown on a character sheet."""
    id: str = Field(min_length=1)
    label: str = Field(min_length=1)
    value: str = ""
    is_custom: bool = False
    is_textarea: bool = False


class CharacterCreate(CamelModel):
    """Payload for creating a character."""
    name: str = Field(min_length=1)
    species: str = ""
    traits: list[CharacterTrait] = Field(default_factory=list)
    linked_world_id: Optional[str] = None
    linked_event_ids: list[str] = Field(default_factory=list)
    linked_writing_ids: list[str] = Field(default_factory=list)


class CharacterUpdate(CamelModel):
    """Payload for updating a character. Only provided fields are patched."""
    name: Optional[str] = Field(default=None, min_length=1)
    species: Optional[str] = None
    traits: Optional[list[CharacterTrait]] = None
    linked_world_id: Optional[str] = None
    linked_event_ids: Optional[list[str]] = None
    linked_writing_ids: Optional[list[str]] = None


class Character(ProjectItem):
    """A character belonging to a project."""
    name: str
    species: str = ""
    traits: list[CharacterTrait] = Field(default_factory=list)
    linked_world_id: Optional[str] = None
    linked_event_ids: list[str] = Field(default_factory=list)
    linked_writing_ids: list[str] = Field(default_factory=list)

    def apply(self, patch: CharacterUpdate) -> "Character":
        return overlay(self, patch, nullable={"linked_world_id"})
