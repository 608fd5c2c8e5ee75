"""Domain models: the project aggregate and its embedded collections."""

from app.models.domain.base import CamelModel, ProjectItem, overlay
from app.models.domain.principal import Principal
from app.models.domain.character import (
    Character,
    CharacterCreate,
    CharacterTrait,
    CharacterUpdate,
)
from app.models.domain.world import World, WorldCreate, WorldUpdate
from app.models.domain.writing import WritingEntry, WritingCreate, WritingUpdate
from app.models.domain.catalogue import (
    CatalogueItem,
    CatalogueItemCreate,
    CatalogueItemUpdate,
)
from app.models.domain.timeline import (
    Era,
    EraCreate,
    EraUpdate,
    TimelineEvent,
    TimelineEventCreate,
    TimelineEventUpdate,
    ReorderRequest,
)
from app.models.domain.project import (
    Project,
    ProjectCreate,
    ProjectUpdate,
    ProjectData,
    UserData,
)

__all__ = [
    "CamelModel", "ProjectItem", "overlay",
    "Principal",
    "Character", "CharacterCreate", "CharacterTrait", "CharacterUpdate",
    "World", "WorldCreate", "WorldUpdate",
    "WritingEntry", "WritingCreate", "WritingUpdate",
    "CatalogueItem", "CatalogueItemCreate", "CatalogueItemUpdate",
    "Era", "EraCreate", "EraUpdate",
    "TimelineEvent", "TimelineEventCreate", "TimelineEventUpdate", "ReorderRequest",
    "Project", "ProjectCreate", "ProjectUpdate", "ProjectData", "UserData",
]
