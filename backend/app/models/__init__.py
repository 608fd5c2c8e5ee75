"""
Aetherquill models.

Usage:
    from app.models import Project, ProjectCreate, Character, Era, TimelineEvent
    from app.models import ProjectCollection, Principal
"""

# --- Enums ---
from app.models.enums import ProjectCollection

# --- Domain models ---
from app.models.domain import (
    CamelModel, ProjectItem, overlay,
    Principal,
    Character, CharacterCreate, CharacterTrait, CharacterUpdate,
    World, WorldCreate, WorldUpdate,
    WritingEntry, WritingCreate, WritingUpdate,
    CatalogueItem, CatalogueItemCreate, CatalogueItemUpdate,
    Era, EraCreate, EraUpdate,
    TimelineEvent, TimelineEventCreate, TimelineEventUpdate, ReorderRequest,
    Project, ProjectCreate, ProjectUpdate, ProjectData, UserData,
)

__all__ = [
    # Enums
    "ProjectCollection",
    # Domain
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
