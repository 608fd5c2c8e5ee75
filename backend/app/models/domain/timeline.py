"""Era and timeline event domain models."""

from typing import Optional

from pydantic import Field

from app.models.domain.base import CamelModel, ProjectItem, overlay


class EraCreate(CamelModel):
    """Payload for creating an era. Its position is assigned by the server."""
    name: str = Field(min_length=1)
    description: str = ""


class EraUpdate(CamelModel):
    """Payload for updating an era. Position changes go through reorder."""
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None


class Era(ProjectItem):
    """A named span of the project's chronology."""
    name: str
    description: str = ""
    order: int = Field(default=0, ge=0)

    def apply(self, patch: EraUpdate) -> "Era":
        return overlay(self, patch)


class TimelineEventCreate(CamelModel):
    """Payload for creating an event inside an era."""
    title: str = Field(min_length=1)
    display_date: str = Field(
        default="",
        description='Display-only date label, e.g. "15th Day of the Sun\'s Height".',
    )
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    linked_character_ids: list[str] = Field(default_factory=list)
    linked_writing_ids: list[str] = Field(default_factory=list)


class TimelineEventUpdate(CamelModel):
    """Payload for updating a timeline event."""
    title: Optional[str] = Field(default=None, min_length=1)
    display_date: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    linked_character_ids: Optional[list[str]] = None
    linked_writing_ids: Optional[list[str]] = None


class TimelineEvent(ProjectItem):
    """An event positioned within its era by ``order``."""
    era_id: str
    title: str
    display_date: str = ""
    description: str = ""
    order: int = Field(default=0, ge=0)
    tags: list[str] = Field(default_factory=list)
    linked_character_ids: list[str] = Field(default_factory=list)
    linked_writing_ids: list[str] = Field(default_factory=list)

    def apply(self, patch: TimelineEventUpdate) -> "TimelineEvent":
        return overlay(self, patch)


class ReorderRequest(CamelModel):
    """Ids in their new display order. Ids not listed keep their position."""
    ordered_ids: list[str]
