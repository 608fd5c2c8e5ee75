"""Writing entry domain model."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from app.models.domain.base import CamelModel, ProjectItem, overlay


class WritingCreate(CamelModel):
    """Payload for creating a writing entry."""
    title: str = Field(min_length=1)
    content: str = ""
    tags: list[str] = Field(default_factory=list)
    linked_character_ids: list[str] = Field(default_factory=list)
    linked_world_id: Optional[str] = None
    linked_event_ids: list[str] = Field(default_factory=list)


class WritingUpdate(CamelModel):
    """Payload for updating a writing entry."""
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    tags: Optional[list[str]] = None
    linked_character_ids: Optional[list[str]] = None
    linked_world_id: Optional[str] = None
    linked_event_ids: Optional[list[str]] = None


class WritingEntry(ProjectItem):
    """A manuscript chapter or note. Timestamps are owned by the server."""
    title: str
    content: str = ""
    tags: list[str] = Field(default_factory=list)
    linked_character_ids: list[str] = Field(default_factory=list)
    linked_world_id: Optional[str] = None
    linked_event_ids: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def apply(self, patch: WritingUpdate) -> "WritingEntry":
        return overlay(self, patch, nullable={"linked_world_id"})
