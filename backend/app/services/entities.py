"""
Characters, worlds, writing entries and catalogue items.

All four collections follow the same embedded CRUD pattern; writing entries
additionally carry server-managed timestamps.
"""

from datetime import datetime, timedelta, timezone

from app.models import (
    CatalogueItem,
    CatalogueItemCreate,
    CatalogueItemUpdate,
    Character,
    CharacterCreate,
    CharacterUpdate,
    ProjectCollection,
    World,
    WorldCreate,
    WorldUpdate,
    WritingCreate,
    WritingEntry,
    WritingUpdate,
)
from app.services.embedded import EmbeddedCollectionService


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _touch(previous: datetime) -> datetime:
    """A fresh ``updated_at`` that is strictly later than ``previous``."""
    now = _now()
    return now if now > previous else previous + timedelta(microseconds=1)


class EntityService(EmbeddedCollectionService):
    """CRUD for the unordered collections of a project."""

    # --- Characters ---

    async def create_character(self, project_id: str, data: CharacterCreate, principal_id: str) -> Character:
        project = await self._load(project_id, principal_id)
        return await self._create_item(project, ProjectCollection.CHARACTERS, Character, data)

    async def list_characters(self, project_id: str, principal_id: str) -> list[Character]:
        return await self._list_items(project_id, ProjectCollection.CHARACTERS, principal_id)

    async def update_character(
        self,
        project_id: str,
        character_id: str,
        data: CharacterUpdate,
        principal_id: str,
    ) -> Character:
        return await self._update_item(
            project_id, ProjectCollection.CHARACTERS, character_id, data, principal_id
        )

    async def delete_character(self, project_id: str, character_id: str, principal_id: str) -> None:
        await self._delete_item(project_id, ProjectCollection.CHARACTERS, character_id, principal_id)

    # --- Worlds ---

    async def create_world(self, project_id: str, data: WorldCreate, principal_id: str) -> World:
        project = await self._load(project_id, principal_id)
        return await self._create_item(project, ProjectCollection.WORLDS, World, data)

    async def list_worlds(self, project_id: str, principal_id: str) -> list[World]:
        return await self._list_items(project_id, ProjectCollection.WORLDS, principal_id)

    async def update_world(
        self,
        project_id: str,
        world_id: str,
        data: WorldUpdate,
        principal_id: str,
    ) -> World:
        return await self._update_item(
            project_id, ProjectCollection.WORLDS, world_id, data, principal_id
        )

    async def delete_world(self, project_id: str, world_id: str, principal_id: str) -> None:
        await self._delete_item(project_id, ProjectCollection.WORLDS, world_id, principal_id)

    # --- Writing entries ---

    async def create_writing(self, project_id: str, data: WritingCreate, principal_id: str) -> WritingEntry:
        project = await self._load(project_id, principal_id)
        now = _now()
        return await self._create_item(
            project, ProjectCollection.WRITINGS, WritingEntry, data,
            created_at=now, updated_at=now,
        )

    async def list_writings(self, project_id: str, principal_id: str) -> list[WritingEntry]:
        return await self._list_items(project_id, ProjectCollection.WRITINGS, principal_id)

    async def update_writing(
        self,
        project_id: str,
        writing_id: str,
        data: WritingUpdate,
        principal_id: str,
    ) -> WritingEntry:
        return await self._update_item(
            project_id, ProjectCollection.WRITINGS, writing_id, data, principal_id,
            finalize=lambda entry: entry.model_copy(update={"updated_at": _touch(entry.updated_at)}),
        )

    async def delete_writing(self, project_id: str, writing_id: str, principal_id: str) -> None:
        await self._delete_item(project_id, ProjectCollection.WRITINGS, writing_id, principal_id)

    # --- Catalogue ---

    async def create_catalogue_item(
        self,
        project_id: str,
        data: CatalogueItemCreate,
        principal_id: str,
    ) -> CatalogueItem:
        project = await self._load(project_id, principal_id)
        return await self._create_item(project, ProjectCollection.CATALOGUE, CatalogueItem, data)

    async def list_catalogue_items(self, project_id: str, principal_id: str) -> list[CatalogueItem]:
        return await self._list_items(project_id, ProjectCollection.CATALOGUE, principal_id)

    async def update_catalogue_item(
        self,
        project_id: str,
        item_id: str,
        data: CatalogueItemUpdate,
        principal_id: str,
    ) -> CatalogueItem:
        return await self._update_item(
            project_id, ProjectCollection.CATALOGUE, item_id, data, principal_id
        )

    async def delete_catalogue_item(self, project_id: str, item_id: str, principal_id: str) -> None:
        await self._delete_item(project_id, ProjectCollection.CATALOGUE, item_id, principal_id)
