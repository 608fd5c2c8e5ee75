"""
Enum definitions for the Aetherquill API.
"""
from enum import Enum


class ProjectCollection(str, Enum):
    """The embedded collections held inside a project document."""
    CHARACTERS = "characters"
    WORLDS = "worlds"
    WRITINGS = "writings"
    ERAS = "eras"
    TIMELINE = "timeline"
    CATALOGUE = "catalogue"

    @property
    def label(self) -> str:
        """Human-readable singular name used in error messages."""
        return _LABELS[self]


_LABELS = {
    ProjectCollection.CHARACTERS: "Character",
    ProjectCollection.WORLDS: "World",
    ProjectCollection.WRITINGS: "Writing entry",
    ProjectCollection.ERAS: "Era",
    ProjectCollection.TIMELINE: "Timeline event",
    ProjectCollection.CATALOGUE: "Catalogue item",
}
