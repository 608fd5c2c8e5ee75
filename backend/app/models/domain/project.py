"""Project aggregate model."""

from datetime import datetime, timezone

from pydantic import Field

from app.models.domain.base import CamelModel
from app.models.domain.catalogue import CatalogueItem
from app.models.domain.character import Character
from app.models.domain.timeline import Era, TimelineEvent
from app.models.domain.world import World
from app.models.domain.writing import WritingEntry


class ProjectCreate(CamelModel):
    """Payload for creating a project."""
    name: str = Field(min_length=1)


class ProjectUpdate(CamelModel):
    """Payload for renaming a project."""
    name: str = Field(min_length=1)


class Project(CamelModel):
    """A project: the root aggregate holding every embedded collection."""
    id: str
    name: str
    owner_id: str
    characters: list[Character] = Field(default_factory=list)
    worlds: list[World] = Field(default_factory=list)
    writings: list[WritingEntry] = Field(default_factory=list)
    eras: list[Era] = Field(default_factory=list)
    timeline: list[TimelineEvent] = Field(default_factory=list)
    catalogue: list[CatalogueItem] = Field(default_factory=list)
    version: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ProjectData(CamelModel):
    """Client-facing snapshot of a project inside the user data payload."""
    project_id: str
    name: str
    characters: list[Character] = Field(default_factory=list)
    worlds: list[World] = Field(default_factory=list)
    writings: list[WritingEntry] = Field(default_factory=list)
    timeline: list[TimelineEvent] = Field(default_factory=list)
    eras: list[Era] = Field(default_factory=list)
    catalogue: list[CatalogueItem] = Field(default_factory=list)

    @classmethod
    def from_project(cls, project: Project) -> "ProjectData":
        return cls(
            project_id=project.id,
            name=project.name,
            characters=project.characters,
            worlds=project.worlds,
            writings=project.writings,
            timeline=project.timeline,
            eras=project.eras,
            catalogue=project.catalogue,
        )


class UserData(CamelModel):
    """Everything the client needs on start-up, keyed by project id."""
    username: str
    projects: dict[str, ProjectData] = Field(default_factory=dict)
