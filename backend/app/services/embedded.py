"""
Shared read-modify-write helpers for collections embedded in a project.

Every operation loads the project through the ownership guard, derives a new
collection value and writes the whole document back.
"""

from typing import Any, Callable, Optional, TypeVar

from pydantic import BaseModel

from app.database.store import ProjectStore
from app.errors import NotFoundError
from app.logging import get_logger
from app.models import Project, ProjectCollection, ProjectItem
from app.services.guard import load_owned_project
from app.services.ids import IdGenerator

logger = get_logger('services.embedded')

ItemT = TypeVar("ItemT", bound=ProjectItem)


def _not_found(collection: ProjectCollection, item_id: str) -> NotFoundError:
    return NotFoundError(f'{collection.label} with ID "{item_id}" not found in this project.')


def find_item(project: Project, collection: ProjectCollection, item_id: str) -> Optional[ProjectItem]:
    return next((item for item in getattr(project, collection.value) if item.id == item_id), None)


class EmbeddedCollectionService:
    """Base service for CRUD over one of a project's embedded collections."""

    def __init__(self, store: ProjectStore, ids: IdGenerator | None = None):
        self.store = store
        self.ids = ids or IdGenerator()

    async def _load(self, project_id: str, principal_id: str) -> Project:
        return await load_owned_project(self.store, project_id, principal_id)

    async def _replace(self, project: Project, collection: ProjectCollection, items: list) -> Project:
        return await self.store.save(project.model_copy(update={collection.value: items}))

    async def _create_item(
        self,
        project: Project,
        collection: ProjectCollection,
        model: type[ItemT],
        data: BaseModel,
        **server_fields: Any,
    ) -> ItemT:
        # Link fields absent from the payload fall back to the model defaults
        item = model(id=self.ids.new_id(), **data.model_dump(), **server_fields)
        await self._replace(project, collection, [*getattr(project, collection.value), item])

        logger.info(f"Created {collection.label.lower()} {item.id[:8]} in project {project.id[:8]}")
        return item

    async def _list_items(
        self,
        project_id: str,
        collection: ProjectCollection,
        principal_id: str,
    ) -> list:
        project = await self._load(project_id, principal_id)
        logger.debug(f"Listing {collection.value} of project {project_id[:8]}")
        return list(getattr(project, collection.value))

    async def _update_item(
        self,
        project_id: str,
        collection: ProjectCollection,
        item_id: str,
        patch: BaseModel,
        principal_id: str,
        finalize: Optional[Callable[[Any], Any]] = None,
    ):
        project = await self._load(project_id, principal_id)
        items = list(getattr(project, collection.value))

        index = next((i for i, item in enumerate(items) if item.id == item_id), None)
        if index is None:
            raise _not_found(collection, item_id)

        updated = items[index].apply(patch).model_copy(update={"id": item_id})
        if finalize is not None:
            updated = finalize(updated)
        items[index] = updated

        await self._replace(project, collection, items)
        return updated

    async def _delete_item(
        self,
        project_id: str,
        collection: ProjectCollection,
        item_id: str,
        principal_id: str,
    ) -> None:
        project = await self._load(project_id, principal_id)
        items = getattr(project, collection.value)

        remaining = [item for item in items if item.id != item_id]
        if len(remaining) == len(items):
            raise _not_found(collection, item_id)

        await self._replace(project, collection, remaining)
        logger.info(f"Deleted {collection.label.lower()} {item_id[:8]} from project {project_id[:8]}")
